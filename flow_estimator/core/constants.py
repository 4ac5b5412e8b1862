"""
Constantes físicas, tablas de propiedades y parámetros del solver de caudal.
Physical constants, property tables and flow-solver parameters.
"""

from typing import Dict

# Gravity acceleration [m/s²]
# Aceleración de la gravedad [m/s²]
G_DEFAULT: float = 9.81

# Density used to convert pressure <-> head [kg/m³]
# Densidad usada para convertir presión <-> altura [kg/m³]
RHO_WATER: float = 1000.0

# Pascals per bar
# Pascales por bar
PA_PER_BAR: float = 1.0e5

# Fixed-point iteration limits
# Límites de la iteración de punto fijo
MAX_ITERATIONS: int = 10
VELOCITY_TOLERANCE_MS: float = 0.001  # m/s

# Kinematic viscosity at 20 °C [m²/s] by fluid type.
# Viscosidad cinemática a 20 °C [m²/s] por tipo de fluido.
FLUID_VISCOSITY: Dict[str, float] = {
    "water": 1.004e-6,
    "oil": 46.0e-6,
    "glycol": 17.2e-6,
}

# Absolute roughness [m] by pipe material.
# Rugosidad absoluta [m] por material de tubería.
EPSILON_PE: float = 1.5e-6
EPSILON_PVC: float = 1.5e-7

MATERIAL_ROUGHNESS: Dict[str, float] = {
    "PE": EPSILON_PE,
    "PVC": EPSILON_PVC,
}
