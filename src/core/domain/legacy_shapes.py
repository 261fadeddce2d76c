"""Shapes written the way the principles warn against.

- `MutableSquare` inherits from `MutableRectangle` and overrides both setters,
  so code written against a rectangle gets surprising areas (LSP).
- `BloatedSquare` / `BloatedRectangle` implement `FatShapeInterface` and are
  forced to provide a volume they cannot compute (ISP).

Only the lesson runner and the tests use these classes.
"""

from __future__ import annotations

from core.domain.errors import IncompleteShapeError, ShapeOperationNotSupportedError


class MutableRectangle:
    def __init__(self) -> None:
        self.width: float | None = None
        self.height: float | None = None
        self.color: str | None = None

    def set_width(self, width: float) -> None:
        self.width = width

    def set_height(self, height: float) -> None:
        self.height = height

    def set_color(self, color: str) -> None:
        self.color = color

    def get_area(self) -> float:
        if self.width is None or self.height is None:
            missing = tuple(
                name for name, value in (("width", self.width), ("height", self.height)) if value is None
            )
            raise IncompleteShapeError(self.__class__.__name__, missing)
        return self.width * self.height


class MutableSquare(MutableRectangle):
    """Keeps both sides equal by letting each setter overwrite the other side."""

    def set_width(self, width: float) -> None:
        self.width = width
        self.height = width

    def set_height(self, height: float) -> None:
        self.width = height
        self.height = height


class BloatedSquare:
    def __init__(self, side: float) -> None:
        self.side = side

    def calculate_area(self) -> float:
        return self.side * self.side

    def calculate_volume(self) -> float:
        raise ShapeOperationNotSupportedError(self.__class__.__name__, "calculate_volume")


class BloatedRectangle:
    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def calculate_area(self) -> float:
        return self.width * self.height

    def calculate_volume(self) -> float:
        raise ShapeOperationNotSupportedError(self.__class__.__name__, "calculate_volume")


class BloatedCuboid:
    """The one shape the fat interface actually fits."""

    def __init__(self, length: float, width: float, height: float) -> None:
        self.length = length
        self.width = width
        self.height = height

    def calculate_area(self) -> float:
        l, w, h = self.length, self.width, self.height
        return 2 * (l * w + l * h + w * h)

    def calculate_volume(self) -> float:
        return self.length * self.width * self.height
