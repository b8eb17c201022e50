"""
Area calculation strategies.

This module provides:
- AreaCalculationStrategy: Abstract base class for kind-restricted area algorithms
- RectangleAreaStrategy / CircleAreaStrategy: Concrete strategies
- AreaCalculator: Non-abstract calculator that uses a strategy via dependency injection
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from shapekit.exceptions import NoStrategySelectedError, UnsupportedShapeError
from shapekit.shape import Shape, ShapeKind

logger = logging.getLogger(__name__)


class AreaCalculationStrategy(ABC):
    """
    Abstract base class for area strategies.

    A strategy only accepts shapes of its ``supported_kind``. Decorated shapes
    report the kind of the shape they wrap, so they are accepted as well.
    """

    @classmethod
    @abstractmethod
    def supported_kind(cls) -> ShapeKind:
        """
        Get the kind of shape this strategy handles.

        Returns:
            The supported ShapeKind
        """
        pass

    def supports(self, shape: Shape) -> bool:
        return shape.kind is self.supported_kind()

    def calculate_area(self, shape: Shape) -> float:
        """
        Compute the area of a shape.

        Args:
            shape: Shape to measure, plain or decorated

        Returns:
            The area of the shape

        Raises:
            UnsupportedShapeError: If the shape kind is not the supported kind
        """
        if not self.supports(shape):
            raise UnsupportedShapeError(shape.kind, self.supported_kind())
        return shape.calculate_area()


class RectangleAreaStrategy(AreaCalculationStrategy):
    @classmethod
    def supported_kind(cls) -> ShapeKind:
        return ShapeKind.RECTANGLE


class CircleAreaStrategy(AreaCalculationStrategy):
    @classmethod
    def supported_kind(cls) -> ShapeKind:
        return ShapeKind.CIRCLE


class AreaCalculator:
    """Computes areas through a replaceable strategy."""

    def __init__(self, strategy: Optional[AreaCalculationStrategy] = None):
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[AreaCalculationStrategy]:
        return self._strategy

    def set_strategy(self, strategy: AreaCalculationStrategy) -> None:
        logger.debug(f"Selected area strategy {strategy.__class__.__name__}")
        self._strategy = strategy

    def calculate_area(self, shape: Shape) -> float:
        if self._strategy is None:
            raise NoStrategySelectedError()
        return self._strategy.calculate_area(shape)
