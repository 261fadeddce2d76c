"""Domain errors.

Hierarchy:
    SolidLabError (base)
    ├── InvalidPurchaseError
    ├── UnsupportedGatewayError
    ├── InvalidFlavorError
    ├── IncompleteShapeError
    ├── InvalidDimensionError
    └── ShapeOperationNotSupportedError
"""

from __future__ import annotations


class SolidLabError(Exception):
    """Base error for every example in the lab.

    The CLI catches this type to report a readable message instead of a traceback.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, str]:
        return {
            "error": self.code,
            "message": self.message,
        }


class InvalidPurchaseError(SolidLabError):
    """Raised for a negative quantity or price."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "INVALID_PURCHASE")


class UnsupportedGatewayError(SolidLabError):
    """No payment processor is registered under the requested name."""

    def __init__(self, gateway: str, available: tuple[str, ...] = ()) -> None:
        self.gateway = gateway
        self.available = available
        hint = f" (available: {', '.join(available)})" if available else ""
        super().__init__(f"Unsupported payment gateway {gateway!r}{hint}", "UNSUPPORTED_GATEWAY")

    def to_dict(self) -> dict[str, str]:
        result = super().to_dict()
        result["gateway"] = self.gateway
        return result


class InvalidFlavorError(SolidLabError):
    def __init__(self, message: str) -> None:
        super().__init__(message, "INVALID_FLAVOR")


class IncompleteShapeError(SolidLabError):
    """A shape was asked for its area before all of its dimensions were set."""

    def __init__(self, shape: str, missing: tuple[str, ...]) -> None:
        self.shape = shape
        self.missing = missing
        super().__init__(
            f"{shape} is missing dimension(s): {', '.join(missing)}",
            "INCOMPLETE_SHAPE",
        )


class InvalidDimensionError(SolidLabError):
    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be >= 0, got {value!r}", "INVALID_DIMENSION")


class ShapeOperationNotSupportedError(SolidLabError):
    """A class was forced to implement an operation that does not apply to it."""

    def __init__(self, shape: str, operation: str) -> None:
        self.shape = shape
        self.operation = operation
        super().__init__(
            f"{shape} cannot {operation}: the interface forces a method it does not use",
            "OPERATION_NOT_SUPPORTED",
        )
