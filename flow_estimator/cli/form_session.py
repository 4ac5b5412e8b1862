"""
Estado del formulario: entradas actuales y último resultado.
Form state: current inputs and last outcome.

No contiene lógica de cálculo; delega en solve().
Holds no calculation logic; delegates to solve().
"""

from dataclasses import fields, replace
from typing import List, Optional

from flow_estimator.core.errors import CalculationError
from flow_estimator.core.properties import get_fluid_label, get_material_label
from flow_estimator.services.flow_service import (
    FlowResult,
    InputSet,
    RawValue,
    SolveOutcome,
    format_result,
    solve,
)

FIELD_NAMES = tuple(f.name for f in fields(InputSet))


class FormSession:
    """
    Modelo de presentación del formulario de caudal.
    Presentation model of the flow form.
    """

    def __init__(self, inputs: Optional[InputSet] = None) -> None:
        self.inputs: InputSet = inputs or InputSet()
        self.outcome: Optional[SolveOutcome] = None

    def update(self, field: str, value: RawValue) -> None:
        """Actualiza un campo / Updates one field."""
        if field not in FIELD_NAMES:
            raise ValueError(
                f"Unknown form field: {field} "
                f"(campo del formulario desconocido: {field})"
            )
        self.inputs = replace(self.inputs, **{field: value})

    def calculate(self) -> SolveOutcome:
        """
        Resuelve con la instantánea actual y guarda el resultado.
        Un error reemplaza cualquier resultado anterior.

        Solves with the current snapshot and stores the outcome.
        An error replaces any previous result.
        """
        self.outcome = solve(self.inputs)
        return self.outcome

    @property
    def result(self) -> Optional[FlowResult]:
        if isinstance(self.outcome, FlowResult):
            return self.outcome
        return None

    @property
    def error(self) -> Optional[CalculationError]:
        if isinstance(self.outcome, CalculationError):
            return self.outcome
        return None

    def display_lines(self, lang: str = "es") -> List[str]:
        """
        Líneas a mostrar para el último resultado.
        Lines to display for the last outcome.
        """
        if self.error is not None:
            return [self.error.localized(lang)]
        if self.result is None:
            return []

        txt = format_result(self.result)
        fluid = get_fluid_label(self.inputs.fluid_type, lang)
        material = get_material_label(self.inputs.material, lang)
        if lang == "es":
            return [
                f"Fluido / material:   {fluid} / {material}",
                f"Caudal:              {txt['flow_lps']} L/s  ({txt['flow_m3h']} m³/h)",
                f"Velocidad:           {txt['velocity_ms']} m/s",
                f"Presión disponible:  {txt['available_pressure_bar']} bar",
            ]
        return [
            f"Fluid / material:    {fluid} / {material}",
            f"Flow rate:           {txt['flow_lps']} L/s  ({txt['flow_m3h']} m³/h)",
            f"Velocity:            {txt['velocity_ms']} m/s",
            f"Available pressure:  {txt['available_pressure_bar']} bar",
        ]
