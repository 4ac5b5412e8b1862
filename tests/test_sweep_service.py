"""
Tests for the sweep_service module.

Pruebas para los barridos de presión y desnivel.
"""

from dataclasses import replace

import numpy as np
import pytest

from flow_estimator.services.flow_service import FlowResult, InputSet, solve
from flow_estimator.services.sweep_service import pressure_range, sweep_elevation, sweep_pressure

BASE = InputSet(
    pressure_bar="3",
    fluid_type="water",
    length_m="450",
    diameter_mm="90",
    material="PE",
    elevation_m="15",
)


def test_pressure_sweep_marks_failures_as_nan() -> None:
    """
    With a 15 m rise, 1 bar cannot drive any flow.
    Con 15 m de subida, 1 bar no alcanza para mover el fluido.
    """
    curve = sweep_pressure(BASE, [0.0, 1.0, 2.0, 3.0, 4.0])

    assert curve.variable == "pressure_bar"
    assert list(curve.valid) == [False, False, True, True, True]
    assert np.all(np.diff(curve.flow_lps[curve.valid]) > 0)
    assert np.all(np.diff(curve.available_pressure_bar[curve.valid]) > 0)


def test_sweep_points_match_single_solves() -> None:
    curve = sweep_pressure(BASE, pressure_range(2.0, 5.0, 4))
    direct = solve(replace(BASE, pressure_bar=3.0))

    assert isinstance(direct, FlowResult)
    assert curve.flow_lps[1] == pytest.approx(direct.flow_lps)
    assert curve.velocity_ms[1] == pytest.approx(direct.velocity_ms)


def test_elevation_sweep_decreasing() -> None:
    curve = sweep_elevation(BASE, [-10.0, 0.0, 10.0, 20.0, 40.0])

    assert list(curve.valid) == [True, True, True, True, False]
    assert np.all(np.diff(curve.available_pressure_bar[curve.valid]) < 0)
    assert np.all(np.diff(curve.flow_lps[curve.valid]) < 0)


def test_pressure_range() -> None:
    values = pressure_range(1.0, 5.0, 5)

    assert list(values) == [1.0, 2.0, 3.0, 4.0, 5.0]
    with pytest.raises(ValueError):
        pressure_range(1.0, 5.0, 1)


def test_rows() -> None:
    curve = sweep_pressure(BASE, [3.0])
    rows = list(curve.rows())

    assert len(rows) == 1
    assert rows[0][0] == 3.0
