"""
shapekit - Factory, Decorator and Strategy patterns on a small shape toolkit.

Shapes are built by factories, styled by decorators and measured by an area
calculator that delegates to a pluggable strategy.
"""

__version__ = "0.1.0"

# Shapes
from .shape import Shape, ShapeKind
from .primitives import Circle, Rectangle

# Decorators
from .decorators import BorderDecorator, ColorDecorator, ShapeDecorator

# Factories
from .factories import CircleFactory, RectangleFactory, ShapeFactory, get_factory, list_factories

# Strategies
from .strategies import (
    AreaCalculationStrategy,
    AreaCalculator,
    CircleAreaStrategy,
    RectangleAreaStrategy,
)

from .exceptions import NoStrategySelectedError, ShapekitError, UnsupportedShapeError

__all__ = [
    # Shapes
    "Shape",
    "ShapeKind",
    "Rectangle",
    "Circle",
    # Decorators
    "ShapeDecorator",
    "BorderDecorator",
    "ColorDecorator",
    # Factories
    "ShapeFactory",
    "RectangleFactory",
    "CircleFactory",
    "get_factory",
    "list_factories",
    # Strategies
    "AreaCalculationStrategy",
    "RectangleAreaStrategy",
    "CircleAreaStrategy",
    "AreaCalculator",
    # Errors
    "ShapekitError",
    "UnsupportedShapeError",
    "NoStrategySelectedError",
]
