"""
Servicio de cálculo de caudal en una tubería presurizada.
Flow estimation service for a pressurized pipe.

A partir de la presión de suministro, la longitud, el diámetro y el material
de la tubería, el tipo de fluido y el desnivel, se resuelve por punto fijo la
velocidad que equilibra la altura disponible con la pérdida por fricción.

From supply pressure, pipe length, diameter and material, fluid type and
elevation change, the velocity that balances the available head against the
friction loss is found by fixed-point iteration.

Incluye funciones para / Includes functions for:
- Lectura tolerante de valores numéricos / Lenient numeric parsing
- Presión disponible corregida por desnivel / Elevation-corrected pressure
- Altura equivalente / Equivalent head
- Iteración de velocidad / Velocity iteration
- solve(): InputSet -> FlowResult | CalculationError
"""

import logging
import math
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Tuple, Union

from flow_estimator.core.constants import (
    G_DEFAULT,
    RHO_WATER,
    PA_PER_BAR,
    MAX_ITERATIONS,
    VELOCITY_TOLERANCE_MS,
)
from flow_estimator.core.correlations import compute_reynolds, friction_factor_swamee_jain
from flow_estimator.core.errors import CalculationError, insufficient_pressure, missing_input
from flow_estimator.core.properties import FluidType, PipeMaterial, get_fluid_viscosity, get_pipe_roughness
from flow_estimator.geometry.pipe_geometries import PipeSegment

logger = logging.getLogger(__name__)

RawValue = Union[str, float, int, None]


@dataclass(frozen=True)
class InputSet:
    """
    Instantánea de los seis campos del formulario, tal como se ingresaron.
    Snapshot of the six form fields, as entered.

    Los campos numéricos pueden ser texto, número o None; se interpretan
    dentro de solve().
    Numeric fields may be text, number or None; they are parsed in solve().
    """

    pressure_bar: RawValue = None
    fluid_type: FluidType = "water"
    length_m: RawValue = None
    diameter_mm: RawValue = None
    material: PipeMaterial = "PE"
    elevation_m: RawValue = "0"


@dataclass(frozen=True)
class SolverState:
    """Estado de una iteración / State of one iteration."""

    iteration: int
    velocity_ms: float
    reynolds: float
    friction_factor: float
    velocity_new_ms: float
    delta_ms: float


@dataclass(frozen=True)
class FlowResult:
    """
    Resultado de un cálculo convergido.
    Result of a converged calculation.

    flow_lps, flow_m3h, velocity_ms y available_pressure_bar son las cuatro
    magnitudes que muestra el formulario; el resto es diagnóstico.
    flow_lps, flow_m3h, velocity_ms and available_pressure_bar are the four
    quantities shown by the form; the rest is diagnostic.
    """

    flow_lps: float
    flow_m3h: float
    velocity_ms: float
    available_pressure_bar: float
    iterations: int = 0
    converged: bool = True
    reynolds: float = 0.0
    friction_factor: float = 0.0

    def to_dict(self) -> Dict[str, object]:
        """Convert everything to a dict (useful for JSON)."""
        return asdict(self)


SolveOutcome = Union[FlowResult, CalculationError]


def parse_number(raw: RawValue) -> Optional[float]:
    """
    Interpreta un valor del formulario como número.
    Parses a form value as a number.

    Devuelve None si está vacío, no es numérico o no es finito.
    Returns None when empty, non-numeric or non-finite.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if raw == "":
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_required(raw: RawValue) -> Optional[float]:
    """
    Igual que parse_number, pero un cero cuenta como ausente.
    Same as parse_number, but zero counts as missing.
    """
    value = parse_number(raw)
    if value is None or value == 0.0:
        return None
    return value


def compute_available_pressure(pressure_bar: float, elevation_m: float, g: float = G_DEFAULT) -> float:
    """
    Presión disponible [Pa] tras descontar la columna hidrostática del desnivel.
    Available pressure [Pa] after subtracting the hydrostatic head of the rise.

        p_avail = p * 1e5 - Δz * g * ρ

    Δz > 0 (subida / uphill) reduce la presión; Δz < 0 la aumenta.
    """
    return pressure_bar * PA_PER_BAR - elevation_m * g * RHO_WATER


def compute_equivalent_head(available_pressure_pa: float, g: float = G_DEFAULT) -> float:
    """Altura equivalente [m] / Equivalent head [m]: ΔH = p / (g ρ)."""
    return available_pressure_pa / (g * RHO_WATER)


def seed_velocity(delta_h_m: float, length_m: float, g: float = G_DEFAULT) -> float:
    """
    Velocidad inicial sin fricción [m/s].
    Friction-free seed velocity [m/s].

        v0 = sqrt(2 g ΔH / L)
    """
    return math.sqrt(2.0 * g * delta_h_m / length_m)


def iterate_velocity(
    delta_h_m: float,
    segment: PipeSegment,
    nu: float,
    g: float = G_DEFAULT,
) -> Tuple[float, List[SolverState], bool]:
    """
    Itera la velocidad hasta que dos estimaciones difieran menos de la tolerancia.
    Iterates the velocity until two estimates differ by less than the tolerance.

    En cada paso / At each step:

        Re    = v D / ν
        f     = Swamee-Jain(Re, D, ε)
        v_new = sqrt(2 g ΔH D / (f L))

    Como máximo MAX_ITERATIONS pasos. Si no se alcanza la tolerancia se
    acepta la última estimación.
    At most MAX_ITERATIONS steps. If the tolerance is not met the last
    estimate is accepted.

    Returns
    -------
    (velocity_ms, states, converged)
    """
    D = segment.diameter_m
    L = segment.length_m
    eps = segment.roughness_m

    v = seed_velocity(delta_h_m, L, g)
    states: List[SolverState] = []
    converged = False

    for iteration in range(1, MAX_ITERATIONS + 1):
        reynolds = compute_reynolds(v, D, nu)
        f = friction_factor_swamee_jain(reynolds, D, eps)
        v_new = math.sqrt((2.0 * g * delta_h_m * D) / (f * L))
        delta = abs(v - v_new)

        states.append(
            SolverState(
                iteration=iteration,
                velocity_ms=v,
                reynolds=reynolds,
                friction_factor=f,
                velocity_new_ms=v_new,
                delta_ms=delta,
            )
        )
        logger.debug(
            "iter %d: v=%.6f Re=%.4e f=%.6f v_new=%.6f |dv|=%.2e",
            iteration, v, reynolds, f, v_new, delta,
        )

        v = v_new
        if delta < VELOCITY_TOLERANCE_MS:
            converged = True
            break

    if not converged:
        logger.debug(
            "tolerance %.3g m/s not met after %d iterations, keeping v=%.6f",
            VELOCITY_TOLERANCE_MS, MAX_ITERATIONS, v,
        )

    return v, states, converged


def _solve(inputs: InputSet) -> Tuple[SolveOutcome, List[SolverState]]:
    pressure_bar = parse_required(inputs.pressure_bar)
    length_m = parse_required(inputs.length_m)
    diameter_mm = parse_required(inputs.diameter_mm)
    if pressure_bar is None or length_m is None or diameter_mm is None:
        return missing_input(), []

    elevation_m = parse_number(inputs.elevation_m)
    if elevation_m is None:
        elevation_m = 0.0

    try:
        nu = get_fluid_viscosity(inputs.fluid_type)
        segment = PipeSegment(
            length_m=length_m,
            diameter_m=diameter_mm / 1000.0,
            roughness_m=get_pipe_roughness(inputs.material),
        )
    except ValueError as exc:
        logger.debug("rejected inputs: %s", exc)
        return missing_input(), []

    available_pa = compute_available_pressure(pressure_bar, elevation_m)
    if available_pa <= 0:
        return insufficient_pressure(), []

    delta_h = compute_equivalent_head(available_pa)
    try:
        velocity_ms, states, converged = iterate_velocity(delta_h, segment, nu)
    except (ValueError, ZeroDivisionError, OverflowError) as exc:
        logger.debug("iteration failed: %s", exc)
        return missing_input(), []

    q_m3s = velocity_ms * segment.area_m2
    if not (math.isfinite(velocity_ms) and math.isfinite(q_m3s)):
        logger.debug("non-finite velocity %r, inputs out of range", velocity_ms)
        return missing_input(), []
    last = states[-1]

    result = FlowResult(
        flow_lps=q_m3s * 1000.0,
        flow_m3h=q_m3s * 3600.0,
        velocity_ms=velocity_ms,
        available_pressure_bar=available_pa / PA_PER_BAR,
        iterations=len(states),
        converged=converged,
        reynolds=last.reynolds,
        friction_factor=last.friction_factor,
    )
    return result, states


def solve(inputs: InputSet) -> SolveOutcome:
    """
    Calcula el caudal para una instantánea del formulario.
    Computes the flow for a form snapshot.

    Parameters
    ----------
    inputs : InputSet
        Los seis campos del formulario / The six form fields.

    Returns
    -------
    FlowResult | CalculationError
        Exactamente uno de los dos / Exactly one of the two:

          - CalculationError("missing_input") si falta presión, longitud
            o diámetro (vacío, no numérico o cero), el fluido no existe o
            los valores quedan fuera del rango calculable.
            when pressure, length or diameter is missing (empty,
            non-numeric or zero), the fluid is unknown, or the values are
            outside the computable range (underflow or overflow).
          - CalculationError("insufficient_pressure") si la presión
            disponible tras el desnivel es <= 0.
            when the elevation-corrected pressure is <= 0.
          - FlowResult en cualquier otro caso / otherwise.
    """
    outcome, _ = _solve(inputs)
    return outcome


def solve_with_trace(inputs: InputSet) -> Tuple[SolveOutcome, List[SolverState]]:
    """
    Igual que solve(), devolviendo además el estado de cada iteración.
    Same as solve(), also returning the state of every iteration.
    """
    return _solve(inputs)


def format_result(result: FlowResult) -> Dict[str, str]:
    """
    Formatea el resultado para mostrarlo: caudales con 1 decimal,
    velocidad y presión con 2 decimales.
    Formats the result for display: flow rates with 1 decimal,
    velocity and pressure with 2 decimals.
    """
    return {
        "flow_lps": f"{result.flow_lps:.1f}",
        "flow_m3h": f"{result.flow_m3h:.1f}",
        "velocity_ms": f"{result.velocity_ms:.2f}",
        "available_pressure_bar": f"{result.available_pressure_bar:.2f}",
    }
