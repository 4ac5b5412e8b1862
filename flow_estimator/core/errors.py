"""
Errores de cálculo recuperables del solver de caudal.
Recoverable calculation errors of the flow solver.

El solver no lanza excepciones por datos de usuario: devuelve un
CalculationError que el formulario muestra tal cual.

The solver does not raise on user data: it returns a CalculationError
that the form displays verbatim.
"""

from dataclasses import dataclass
from typing import Dict, Literal

ErrorKind = Literal["missing_input", "insufficient_pressure"]

MISSING_INPUT: ErrorKind = "missing_input"
INSUFFICIENT_PRESSURE: ErrorKind = "insufficient_pressure"

ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    MISSING_INPUT: {
        "es": "Por favor ingrese todos los valores requeridos.",
        "en": "Please enter all required values.",
    },
    INSUFFICIENT_PRESSURE: {
        "es": "Presión insuficiente para vencer el desnivel indicado.",
        "en": "Insufficient pressure to overcome the specified elevation.",
    },
}


@dataclass(frozen=True)
class CalculationError:
    """
    Resultado fallido de un cálculo.
    Failed calculation outcome.

    kind : "missing_input" | "insufficient_pressure"
    message : mensaje legible (EN + ES) / human-readable message (EN + ES)
    """

    kind: ErrorKind
    message: str

    def localized(self, lang: str = "es") -> str:
        """Mensaje en un solo idioma / Message in a single language."""
        return ERROR_MESSAGES[self.kind][lang]


def make_error(kind: ErrorKind) -> CalculationError:
    """
    Construye el error con su mensaje bilingüe.
    Builds the error with its bilingual message.
    """
    texts = ERROR_MESSAGES[kind]
    return CalculationError(kind=kind, message=f"{texts['en']} ({texts['es']})")


def missing_input() -> CalculationError:
    return make_error(MISSING_INPUT)


def insufficient_pressure() -> CalculationError:
    return make_error(INSUFFICIENT_PRESSURE)
