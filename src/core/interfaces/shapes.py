"""Shape contracts.

`ShapeInterface` and `ThreeDimensionalShapeInterface` are the segregated pair:
flat shapes implement the first, solids implement the second.

`FatShapeInterface` is the single interface every shape used to implement,
kept so the violating example has something to be forced into.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ShapeInterface(Protocol):
    def calculate_area(self) -> float:
        ...


@runtime_checkable
class ThreeDimensionalShapeInterface(Protocol):
    def calculate_area(self) -> float:
        ...

    def calculate_volume(self) -> float:
        ...


@runtime_checkable
class FatShapeInterface(Protocol):
    """Area and volume for every shape, whether or not it has a volume."""

    def calculate_area(self) -> float:
        ...

    def calculate_volume(self) -> float:
        ...
