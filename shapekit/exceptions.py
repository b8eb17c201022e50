"""
Exceptions raised by shapekit.

Errors are never caught inside the package; they propagate to the caller.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from shapekit.shape import ShapeKind


class ShapekitError(Exception):
    """Base class for shapekit errors."""


class UnsupportedShapeError(ShapekitError, ValueError):
    """Raised when an area strategy is given a shape of the wrong kind."""

    def __init__(
        self,
        shape_kind: "ShapeKind",
        expected_kind: Optional["ShapeKind"] = None,
    ) -> None:
        self.shape_kind = shape_kind
        self.expected_kind = expected_kind
        message = f"Unsupported shape: {shape_kind.value}"
        if expected_kind is not None:
            message += f" (expected {expected_kind.value})"
        super().__init__(message)


class NoStrategySelectedError(ShapekitError, RuntimeError):
    """Raised when an AreaCalculator is used before a strategy is set."""

    def __init__(self) -> None:
        super().__init__(
            "No area calculation strategy selected. Call set_strategy() first."
        )
