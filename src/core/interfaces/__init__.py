"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los adaptadores concretos.
- Invierte dependencias: el core depende de abstracciones.
"""

from core.interfaces.payment import PaymentProcessor
from core.interfaces.shapes import (
    FatShapeInterface,
    ShapeInterface,
    ThreeDimensionalShapeInterface,
)

__all__ = [
    "FatShapeInterface",
    "PaymentProcessor",
    "ShapeInterface",
    "ThreeDimensionalShapeInterface",
]
