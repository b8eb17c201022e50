"""
Leaf shapes.

Both shapes are anchored in their own local coordinates: the rectangle's
lower-left corner and the circle's center sit at the origin.
"""

import math
from typing import Any

import numpy as np
from matplotlib.patches import Circle as MplCircle
from matplotlib.patches import Rectangle as MplRectangle

from shapekit.shape import Shape, ShapeKind


def _check_dimension(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive number, got {value}")
    return value


class Rectangle(Shape):
    """An axis-aligned rectangle."""

    def __init__(self, width: float, height: float):
        self._width = _check_dimension("width", width)
        self._height = _check_dimension("height", height)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.RECTANGLE

    def render(self) -> None:
        print("Drawing a Rectangle")

    def calculate_area(self) -> float:
        return self._width * self._height

    def bounds(self) -> np.ndarray:
        return np.array([[0.0, 0.0], [self._width, self._height]])

    def make_patch(self, **style: Any) -> MplRectangle:
        return MplRectangle((0.0, 0.0), self._width, self._height, **style)

    def __repr__(self) -> str:
        return f"Rectangle(width={self._width}, height={self._height})"


class Circle(Shape):
    """A circle centered on the origin."""

    def __init__(self, radius: float):
        self._radius = _check_dimension("radius", radius)

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.CIRCLE

    def render(self) -> None:
        print("Drawing a Circle")

    def calculate_area(self) -> float:
        return math.pi * self._radius * self._radius

    def bounds(self) -> np.ndarray:
        r = self._radius
        return np.array([[-r, -r], [r, r]])

    def make_patch(self, **style: Any) -> MplCircle:
        return MplCircle((0.0, 0.0), self._radius, **style)

    def __repr__(self) -> str:
        return f"Circle(radius={self._radius})"
