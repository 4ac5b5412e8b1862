"""
Propiedades de fluidos y materiales de tubería.
Fluid and pipe-material properties.

Tablas cerradas / Closed tables:

  - Agua / Water      -> ν = 1.004e-6 m²/s
  - Aceite / Oil      -> ν = 46e-6 m²/s
  - Glicol / Glycol   -> ν = 17.2e-6 m²/s

  - PE                -> ε = 1.5e-6 m
  - PVC               -> ε = 1.5e-7 m
"""

from typing import Dict, Literal

from flow_estimator.core.constants import (
    FLUID_VISCOSITY,
    MATERIAL_ROUGHNESS,
)

# Allowed fluid and material tags.
# Etiquetas permitidas de fluido y material.
FluidType = Literal["water", "oil", "glycol"]
PipeMaterial = Literal["PE", "PVC"]

FLUIDS: Dict[str, dict] = {
    "water": {
        "nu": FLUID_VISCOSITY["water"],
        "label": {"es": "Agua (20 °C)", "en": "Water (20 °C)"},
    },
    "oil": {
        "nu": FLUID_VISCOSITY["oil"],
        "label": {"es": "Aceite (20 °C)", "en": "Oil (20 °C)"},
    },
    "glycol": {
        "nu": FLUID_VISCOSITY["glycol"],
        "label": {"es": "Glicol (20 °C)", "en": "Glycol (20 °C)"},
    },
}

MATERIALS: Dict[str, dict] = {
    "PE": {
        "epsilon": MATERIAL_ROUGHNESS["PE"],
        "label": {"es": "Polietileno (PE)", "en": "Polyethylene (PE)"},
    },
    "PVC": {
        "epsilon": MATERIAL_ROUGHNESS["PVC"],
        "label": {"es": "PVC", "en": "PVC"},
    },
}


def get_fluid_viscosity(fluid: str) -> float:
    """
    Devuelve la viscosidad cinemática del fluido [m²/s].
    Returns the kinematic viscosity of the fluid [m²/s].

    Parámetros / Parameters
    -----------------------
    fluid : str
        "water", "oil" o / or "glycol".
    """
    try:
        return FLUIDS[fluid]["nu"]
    except KeyError as exc:
        raise ValueError(
            f"Unknown fluid type: {fluid} "
            f"(tipo de fluido desconocido: {fluid})"
        ) from exc


def get_pipe_roughness(material: str) -> float:
    """
    Devuelve la rugosidad absoluta del material [m].
    Returns the absolute roughness of the material [m].

    Cualquier material distinto de "PE" se trata como PVC.
    Any material other than "PE" is treated as PVC.
    """
    key = "PE" if material == "PE" else "PVC"
    return MATERIALS[key]["epsilon"]


def get_fluid_label(fluid: str, lang: str = "es") -> str:
    """Etiqueta legible del fluido / Human-readable fluid label."""
    if fluid in FLUIDS:
        return FLUIDS[fluid]["label"][lang]
    return fluid


def get_material_label(material: str, lang: str = "es") -> str:
    """Etiqueta legible del material / Human-readable material label."""
    if material in MATERIALS:
        return MATERIALS[material]["label"][lang]
    return material
