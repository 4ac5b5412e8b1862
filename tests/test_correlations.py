"""
Tests for correlations, property tables and pipe geometry.

Pruebas para correlaciones, tablas de propiedades y geometría de la tubería.
"""

import math
from dataclasses import fields

import pytest

from flow_estimator.core.constants import EPSILON_PE, EPSILON_PVC
from flow_estimator.core.correlations import (
    compute_reynolds,
    friction_factor_swamee_jain,
)
from flow_estimator.core.errors import (
    INSUFFICIENT_PRESSURE,
    MISSING_INPUT,
    insufficient_pressure,
    missing_input,
)
from flow_estimator.core.properties import (
    MATERIALS,
    get_fluid_label,
    get_fluid_viscosity,
    get_pipe_roughness,
)
from flow_estimator.geometry.pipe_geometries import PipeSegment


def test_reynolds_kinematic() -> None:
    """Re = v D / ν for water in a 90 mm pipe at 1 m/s."""
    Re = compute_reynolds(1.0, 0.09, 1.004e-6)

    assert Re == pytest.approx(0.09 / 1.004e-6)


def test_swamee_jain_reference_value() -> None:
    """
    Converged step of the 3 bar / 450 m / 90 mm PE water case.
    Paso convergido del caso de agua 3 bar / 450 m / 90 mm PE.
    """
    f = friction_factor_swamee_jain(253394.28, 0.09, 1.5e-6)

    assert f == pytest.approx(0.0150160, rel=1e-5)


def test_swamee_jain_smoother_pipe_has_lower_f() -> None:
    Re = 2.0e5
    assert friction_factor_swamee_jain(Re, 0.09, EPSILON_PVC) < friction_factor_swamee_jain(
        Re, 0.09, EPSILON_PE
    )


def test_swamee_jain_decreases_with_reynolds() -> None:
    values = [friction_factor_swamee_jain(Re, 0.09, EPSILON_PE) for Re in (5e3, 5e4, 5e5)]

    assert values[0] > values[1] > values[2]


@pytest.mark.parametrize(
    "args",
    [(0.0, 0.09, 1e-6), (-1.0, 0.09, 1e-6), (1e5, 0.0, 1e-6), (1e5, 0.09, -1e-6)],
)
def test_swamee_jain_rejects_invalid(args) -> None:
    with pytest.raises(ValueError):
        friction_factor_swamee_jain(*args)


def test_reynolds_rejects_invalid() -> None:
    with pytest.raises(ValueError):
        compute_reynolds(1.0, 0.09, 0.0)
    with pytest.raises(ValueError):
        compute_reynolds(1.0, 0.0, 1e-6)


def test_property_tables() -> None:
    assert get_fluid_viscosity("water") == 1.004e-6
    assert get_fluid_viscosity("oil") == 46e-6
    assert get_fluid_viscosity("glycol") == 17.2e-6
    assert get_pipe_roughness("PE") == 1.5e-6
    assert get_pipe_roughness("PVC") == 1.5e-7
    assert get_pipe_roughness("pe") == 1.5e-7
    assert get_pipe_roughness("") == 1.5e-7


def test_unknown_fluid_raises() -> None:
    with pytest.raises(ValueError, match="Unknown fluid type"):
        get_fluid_viscosity("mercury")


def test_labels() -> None:
    assert get_fluid_label("oil", "en") == "Oil (20 °C)"
    assert get_fluid_label("oil", "es") == "Aceite (20 °C)"
    assert get_fluid_label("mercury", "en") == "mercury"


def test_pipe_segment_area_and_validation() -> None:
    seg = PipeSegment(length_m=450.0, diameter_m=0.09, roughness_m=EPSILON_PE)

    assert seg.area_m2 == pytest.approx(math.pi * 0.045 ** 2)
    with pytest.raises(ValueError):
        PipeSegment(length_m=0.0, diameter_m=0.09, roughness_m=EPSILON_PE)
    with pytest.raises(ValueError):
        PipeSegment(length_m=10.0, diameter_m=-0.09, roughness_m=EPSILON_PE)


def test_pipe_segment_fields_and_material_table() -> None:
    """
    The segment carries only geometry; roughness always comes from MATERIALS.
    El tramo solo lleva geometría; la rugosidad siempre sale de MATERIALS.
    """
    assert [f.name for f in fields(PipeSegment)] == ["length_m", "diameter_m", "roughness_m"]
    assert get_pipe_roughness("PE") == MATERIALS["PE"]["epsilon"]
    assert get_pipe_roughness("steel") == MATERIALS["PVC"]["epsilon"]


def test_error_messages_are_bilingual() -> None:
    miss = missing_input()
    low = insufficient_pressure()

    assert miss.kind == MISSING_INPUT
    assert low.kind == INSUFFICIENT_PRESSURE
    assert miss.localized("en") in miss.message
    assert miss.localized("es") in miss.message
    assert low.localized("es") == "Presión insuficiente para vencer el desnivel indicado."
