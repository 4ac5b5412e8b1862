"""
Barridos del solver sobre un rango de presiones o desniveles.
Solver sweeps over a range of supply pressures or elevations.

Cada punto se resuelve de forma independiente con solve(); los puntos que
terminan en CalculationError quedan como NaN.
Each point is solved independently with solve(); points that end in a
CalculationError are stored as NaN.
"""

from dataclasses import dataclass, replace
from typing import Iterable

import numpy as np

from flow_estimator.services.flow_service import FlowResult, InputSet, solve


@dataclass
class FlowCurve:
    """
    Curva de caudal: una fila por valor barrido.
    Flow curve: one row per swept value.
    """
    variable: str               # "pressure_bar" / "elevation_m"
    x: np.ndarray
    flow_lps: np.ndarray
    velocity_ms: np.ndarray
    available_pressure_bar: np.ndarray

    @property
    def valid(self) -> np.ndarray:
        """Máscara de puntos resueltos / Mask of solved points."""
        return ~np.isnan(self.flow_lps)

    def rows(self):
        """Itera (x, Q [L/s], v [m/s], p_avail [bar])."""
        return zip(self.x, self.flow_lps, self.velocity_ms, self.available_pressure_bar)


def pressure_range(start_bar: float, stop_bar: float, num: int) -> np.ndarray:
    """Presiones equiespaciadas [bar] / Evenly spaced pressures [bar]."""
    if num < 2:
        raise ValueError(
            "At least 2 points are required "
            "(se requieren al menos 2 puntos)."
        )
    return np.linspace(start_bar, stop_bar, num)


def _sweep(inputs: InputSet, field: str, values: Iterable[float]) -> FlowCurve:
    x = np.asarray(list(values), dtype=float)
    flow = np.full(x.shape, np.nan)
    velocity = np.full(x.shape, np.nan)
    p_avail = np.full(x.shape, np.nan)

    for i, value in enumerate(x):
        outcome = solve(replace(inputs, **{field: float(value)}))
        if isinstance(outcome, FlowResult):
            flow[i] = outcome.flow_lps
            velocity[i] = outcome.velocity_ms
            p_avail[i] = outcome.available_pressure_bar

    return FlowCurve(
        variable=field,
        x=x,
        flow_lps=flow,
        velocity_ms=velocity,
        available_pressure_bar=p_avail,
    )


def sweep_pressure(inputs: InputSet, pressures_bar: Iterable[float]) -> FlowCurve:
    """
    Resuelve para cada presión de suministro [bar].
    Solves for every supply pressure [bar].
    """
    return _sweep(inputs, "pressure_bar", pressures_bar)


def sweep_elevation(inputs: InputSet, elevations_m: Iterable[float]) -> FlowCurve:
    """
    Resuelve para cada desnivel [m].
    Solves for every elevation change [m].
    """
    return _sweep(inputs, "elevation_m", elevations_m)
