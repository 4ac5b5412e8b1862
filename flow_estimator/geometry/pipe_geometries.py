import math
from dataclasses import dataclass


@dataclass
class PipeSegment:
    """
    Representa la tubería recta de sección circular del cálculo.
    Represents the straight circular pipe of the calculation.

    Parameters
    ----------
    length_m : float
        Longitud de la tubería [m].
        Pipe length [m].

    diameter_m : float
        Diámetro interno de la tubería [m].
        Internal pipe diameter [m].

    roughness_m : float
        Rugosidad absoluta de la pared [m].
        Absolute wall roughness [m].
    """

    length_m: float
    diameter_m: float
    roughness_m: float

    def __post_init__(self) -> None:
        """
        Validación básica de los parámetros geométricos.
        Basic validation of geometric parameters.
        """
        if self.length_m <= 0:
            raise ValueError(
                "Pipe length must be > 0 "
                "(la longitud de la tubería debe ser > 0)."
            )
        if self.diameter_m <= 0:
            raise ValueError(
                "Pipe diameter must be > 0 "
                "(el diámetro de la tubería debe ser > 0)."
            )
        if self.roughness_m < 0:
            raise ValueError(
                "Roughness cannot be negative "
                "(la rugosidad no puede ser negativa)."
            )

    @property
    def area_m2(self) -> float:
        """Área de la sección [m²] / Cross-sectional area [m²]."""
        return math.pi * (self.diameter_m / 2.0) ** 2
