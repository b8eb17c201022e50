"""
Shape decorators.

A decorator wraps another shape and is itself a shape. Everything is delegated
to the wrapped shape; a decorator only adds an extra line to ``render`` and
adjusts the patch style of the PNG preview. The area and bounds of a
decorated shape are always those of the innermost shape.
"""

from typing import Any, Dict

import numpy as np
from matplotlib.colors import is_color_like
from matplotlib.patches import Patch

from shapekit.constants import BORDER_WIDTH, COLOR_ALIASES
from shapekit.shape import Shape, ShapeKind


class ShapeDecorator(Shape):
    """Base class for decorators. Owns the wrapped shape."""

    def __init__(self, shape: Shape):
        if not isinstance(shape, Shape):
            raise TypeError(
                f"{self.__class__.__name__} can only wrap a Shape, got {type(shape).__name__}"
            )
        self._shape = shape

    @property
    def wrapped(self) -> Shape:
        """The shape directly wrapped by this decorator."""
        return self._shape

    @property
    def kind(self) -> ShapeKind:
        return self._shape.kind

    def render(self) -> None:
        self._shape.render()

    def calculate_area(self) -> float:
        return self._shape.calculate_area()

    def bounds(self) -> np.ndarray:
        return self._shape.bounds()

    def make_patch(self, **style: Any) -> Patch:
        return self._shape.make_patch(**style)

    def patch_style(self) -> Dict[str, Any]:
        return self._shape.patch_style()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._shape!r})"


class BorderDecorator(ShapeDecorator):
    def render(self) -> None:
        self._shape.render()
        print("Adding border to the shape.")

    def patch_style(self) -> Dict[str, Any]:
        style = self._shape.patch_style()
        style["linewidth"] = BORDER_WIDTH
        return style


class ColorDecorator(ShapeDecorator):
    def __init__(self, shape: Shape, color: str):
        super().__init__(shape)
        self._color = color

    @property
    def color(self) -> str:
        return self._color

    def render(self) -> None:
        self._shape.render()
        print(f"Applying color {self._color} to the shape.")

    def resolved_color(self) -> str:
        """
        Translate the color into a name matplotlib understands.

        Raises:
            ValueError: If the color is neither an alias nor a matplotlib color
        """
        color = COLOR_ALIASES.get(self._color.strip().lower(), self._color)
        if not is_color_like(color):
            raise ValueError(f"Unknown color '{self._color}'")
        return color

    def patch_style(self) -> Dict[str, Any]:
        style = self._shape.patch_style()
        style["fill"] = True
        style["facecolor"] = self.resolved_color()
        return style

    def __repr__(self) -> str:
        return f"ColorDecorator({self._shape!r}, color={self._color!r})"
