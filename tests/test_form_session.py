"""
Tests for FormSession (form state: inputs and last outcome).

Pruebas para FormSession (estado del formulario).
"""

import pytest

from flow_estimator.cli.form_session import FormSession
from flow_estimator.core.errors import INSUFFICIENT_PRESSURE, MISSING_INPUT
from flow_estimator.services.flow_service import FlowResult, InputSet


def _filled_session() -> FormSession:
    session = FormSession()
    session.update("pressure_bar", "3")
    session.update("length_m", "450")
    session.update("diameter_mm", "90")
    return session


def test_new_session_defaults() -> None:
    session = FormSession()

    assert session.inputs == InputSet()
    assert session.inputs.fluid_type == "water"
    assert session.inputs.material == "PE"
    assert session.inputs.elevation_m == "0"
    assert session.outcome is None
    assert session.display_lines() == []


def test_calculate_stores_result() -> None:
    session = _filled_session()
    outcome = session.calculate()

    assert isinstance(outcome, FlowResult)
    assert session.result is outcome
    assert session.error is None


def test_error_replaces_previous_result() -> None:
    """
    A failed calculation hides the previous result.
    Un cálculo fallido oculta el resultado anterior.
    """
    session = _filled_session()
    session.calculate()
    session.update("elevation_m", "40")
    session.calculate()

    assert session.result is None
    assert session.error.kind == INSUFFICIENT_PRESSURE
    assert session.display_lines("en") == [
        "Insufficient pressure to overcome the specified elevation."
    ]


def test_missing_input_message() -> None:
    session = FormSession()
    session.calculate()

    assert session.error.kind == MISSING_INPUT
    assert session.display_lines("es") == ["Por favor ingrese todos los valores requeridos."]


def test_display_lines_formatting() -> None:
    session = _filled_session()
    res = session.calculate()
    lines = session.display_lines("en")

    assert len(lines) == 4
    assert f"{res.flow_lps:.1f} L/s" in lines[1]
    assert f"{res.flow_m3h:.1f} m³/h" in lines[1]
    assert f"{res.velocity_ms:.2f} m/s" in lines[2]
    assert f"{res.available_pressure_bar:.2f} bar" in lines[3]
    assert "Water" in lines[0]


def test_update_unknown_field() -> None:
    with pytest.raises(ValueError, match="Unknown form field"):
        FormSession().update("temperature", "20")
