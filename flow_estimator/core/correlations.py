"""
Correlaciones para el factor de fricción Darcy-Weisbach en flujo turbulento.
Correlations for the Darcy-Weisbach friction factor in turbulent flow.

Incluye:
- Número de Reynolds con viscosidad cinemática: Re = v * D / ν
- Correlación explícita tipo Colebrook (Swamee-Jain):
      f = 0.25 / [ log10( ε/(3.7 D) + 5.74 / Re^0.9 ) ]²

Includes:
- Reynolds number with kinematic viscosity: Re = v * D / ν
- Explicit Colebrook-type correlation (Swamee-Jain), see above.

No hay rama laminar: la correlación se aplica para cualquier Re > 0.
There is no laminar branch: the correlation is applied for any Re > 0.
"""

import math


def compute_reynolds(velocity_ms: float, diameter_m: float, nu: float) -> float:
    """
    Número de Reynolds con viscosidad cinemática:
    Reynolds number with kinematic viscosity:

        Re = v * D / ν

    Parameters
    ----------
    velocity_ms : float
        Velocidad media [m/s] / Mean velocity [m/s].
    diameter_m : float
        Diámetro interno [m] / Internal diameter [m].
    nu : float
        Viscosidad cinemática [m²/s] / Kinematic viscosity [m²/s].
    """
    if nu <= 0:
        raise ValueError(
            "nu must be > 0 (ν debe ser > 0)."
        )
    if diameter_m <= 0:
        raise ValueError(
            "Diameter must be > 0 (el diámetro debe ser > 0)."
        )
    return velocity_ms * diameter_m / nu


def friction_factor_swamee_jain(Re: float, diameter_m: float, roughness_m: float) -> float:
    """
    Ecuación explícita de Swamee-Jain para flujo turbulento
    en tubería lisa o rugosa.

    Swamee-Jain explicit correlation for turbulent flow
    in smooth or rough pipes:

        f = 0.25 / [ log10( ε/(3.7 D) + 5.74 / Re^0.9 ) ]²

    donde / where:
      - ε es la rugosidad absoluta [m] / ε is the absolute roughness [m]
      - D el diámetro [m]           / D is the diameter [m]
    """
    if Re <= 0:
        raise ValueError(
            "Re must be > 0 to compute the friction factor "
            "(Re debe ser > 0 para calcular el factor de fricción)."
        )
    if diameter_m <= 0:
        raise ValueError(
            "Diameter must be > 0 "
            "(el diámetro debe ser > 0)."
        )
    if roughness_m < 0:
        raise ValueError(
            "Roughness cannot be negative "
            "(la rugosidad no puede ser negativa)."
        )

    term = roughness_m / (3.7 * diameter_m) + 5.74 / (Re ** 0.9)
    log_term = math.log10(term)
    if log_term == 0.0:
        raise ValueError(
            "The Swamee-Jain log term must differ from 1 "
            "(el término dentro del logaritmo debe ser distinto de 1)."
        )

    return 0.25 / (log_term ** 2)

