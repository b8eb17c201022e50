"""
Command-line demo: build, decorate and measure the two default shapes.
"""

import logging

from shapekit.constants import DEMO_CIRCLE_COLOR, DEMO_RECTANGLE_COLOR
from shapekit.decorators import BorderDecorator, ColorDecorator
from shapekit.factories import CircleFactory, RectangleFactory
from shapekit.strategies import AreaCalculator, CircleAreaStrategy, RectangleAreaStrategy


def run_demo() -> None:
    """
    Print the render lines of a decorated rectangle and circle, then their areas.

    Raises:
        UnsupportedShapeError: If a strategy is paired with the wrong shape
    """
    # Factories
    rectangle = RectangleFactory().create_shape()
    circle = CircleFactory().create_shape()

    # Decorators
    decorated_rectangle = BorderDecorator(ColorDecorator(rectangle, DEMO_RECTANGLE_COLOR))
    decorated_rectangle.render()

    decorated_circle = BorderDecorator(ColorDecorator(circle, DEMO_CIRCLE_COLOR))
    decorated_circle.render()

    # Strategies
    calculator = AreaCalculator()

    calculator.set_strategy(RectangleAreaStrategy())
    print(f"Rectangle area: {calculator.calculate_area(decorated_rectangle)}")

    calculator.set_strategy(CircleAreaStrategy())
    print(f"Circle area: {calculator.calculate_area(decorated_circle)}")


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_demo()
    return 0
