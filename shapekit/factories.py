"""Shape factories.

Each factory builds one kind of shape with fixed built-in dimensions.

Usage:
    from shapekit.factories import get_factory
    shape = get_factory("circle").create_shape()
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from shapekit.constants import (
    DEFAULT_CIRCLE_RADIUS,
    DEFAULT_RECTANGLE_HEIGHT,
    DEFAULT_RECTANGLE_WIDTH,
)
from shapekit.primitives import Circle, Rectangle
from shapekit.shape import Shape

logger = logging.getLogger(__name__)


class ShapeFactory(ABC):
    @abstractmethod
    def create_shape(self) -> Shape:
        """Return a newly constructed shape."""


class RectangleFactory(ShapeFactory):
    def create_shape(self) -> Rectangle:
        logger.debug("Creating default rectangle")
        return Rectangle(DEFAULT_RECTANGLE_WIDTH, DEFAULT_RECTANGLE_HEIGHT)


class CircleFactory(ShapeFactory):
    def create_shape(self) -> Circle:
        logger.debug("Creating default circle")
        return Circle(DEFAULT_CIRCLE_RADIUS)


_FACTORIES: dict[str, type[ShapeFactory]] = {
    "rectangle": RectangleFactory,
    "circle": CircleFactory,
}


def get_factory(name: str) -> ShapeFactory:
    """Get a factory by shape name.
    Args:
        name: The shape name (e.g., "rectangle")
    Returns:
        A new factory instance for that shape
    """
    key = name.strip().lower()
    if key not in _FACTORIES:
        available = ", ".join(sorted(_FACTORIES.keys()))
        raise ValueError(f"Unknown shape factory '{name}'. Available: {available}")
    return _FACTORIES[key]()


def list_factories() -> list[str]:
    return sorted(_FACTORIES.keys())
