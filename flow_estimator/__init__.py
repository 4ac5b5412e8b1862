"""
Paquete flow_estimator: caudal en una tubería presurizada.

Expuesto:
- solve
- InputSet, FlowResult, CalculationError
"""

from .core.errors import CalculationError
from .services.flow_service import FlowResult, InputSet, solve

__all__ = ["solve", "InputSet", "FlowResult", "CalculationError"]

__version__ = "0.1.0"
