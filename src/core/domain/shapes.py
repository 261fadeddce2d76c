"""Shapes that substitute for each other safely.

`Shape` holds what every shape shares (color). `Rectangle` and `Square` are
siblings, not parent and child, so a square never inherits width/height
setters it would have to override. Flat shapes implement `ShapeInterface`;
`Cuboid` implements `ThreeDimensionalShapeInterface`.
"""

from __future__ import annotations

from core.domain.errors import IncompleteShapeError, InvalidDimensionError


def _check_dimension(name: str, value: float) -> float:
    if value < 0:
        raise InvalidDimensionError(name, value)
    return value


class Shape:
    """Generic behavior every shape exposes."""

    def __init__(self, color: str | None = None) -> None:
        self.color = color

    def set_color(self, color: str) -> None:
        self.color = color

    def get_color(self) -> str | None:
        return self.color

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(color={self.color!r})"


class Rectangle(Shape):
    def __init__(
        self,
        width: float | None = None,
        height: float | None = None,
        color: str | None = None,
    ) -> None:
        super().__init__(color)
        self.width = None if width is None else _check_dimension("width", width)
        self.height = None if height is None else _check_dimension("height", height)

    def set_width(self, width: float) -> None:
        self.width = _check_dimension("width", width)

    def set_height(self, height: float) -> None:
        self.height = _check_dimension("height", height)

    def get_area(self) -> float:
        missing = tuple(
            name for name, value in (("width", self.width), ("height", self.height)) if value is None
        )
        if missing:
            raise IncompleteShapeError(self.__class__.__name__, missing)
        return self.width * self.height

    def calculate_area(self) -> float:
        return self.get_area()


class Square(Shape):
    def __init__(self, side: float | None = None, color: str | None = None) -> None:
        super().__init__(color)
        self.side = None if side is None else _check_dimension("side", side)

    def set_side(self, side: float) -> None:
        self.side = _check_dimension("side", side)

    def get_area(self) -> float:
        if self.side is None:
            raise IncompleteShapeError(self.__class__.__name__, ("side",))
        return self.side * self.side

    def calculate_area(self) -> float:
        return self.get_area()


class Cuboid(Shape):
    """Rectangular box: the only shape here with a volume."""

    def __init__(
        self,
        length: float,
        width: float,
        height: float,
        color: str | None = None,
    ) -> None:
        super().__init__(color)
        self.length = _check_dimension("length", length)
        self.width = _check_dimension("width", width)
        self.height = _check_dimension("height", height)

    def calculate_area(self) -> float:
        """Total surface area."""

        l, w, h = self.length, self.width, self.height
        return 2 * (l * w + l * h + w * h)

    def calculate_volume(self) -> float:
        return self.length * self.width * self.height
