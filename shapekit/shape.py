"""
Shape module - The common interface of every drawable, measurable shape.

Leaf shapes (see ``shapekit.primitives``) and decorators (see
``shapekit.decorators``) both implement this interface, so a decorated shape
can be used anywhere a plain one is expected.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

import numpy as np

from shapekit.constants import (
    DEFAULT_PNG_HEIGHT,
    DEFAULT_PNG_MARGIN,
    DEFAULT_PNG_WIDTH,
    DPI,
    OUTLINE_COLOR,
    OUTLINE_WIDTH,
)

if TYPE_CHECKING:
    from matplotlib.patches import Patch

logger = logging.getLogger(__name__)


class ShapeKind(Enum):
    RECTANGLE = "Rectangle"
    CIRCLE = "Circle"


class Shape(ABC):
    """
    Abstract base class for shapes.

    A shape can render itself to the console and compute its own area. Every
    shape also reports its ``kind``, which area strategies use to decide
    whether they can handle it.
    """

    @property
    @abstractmethod
    def kind(self) -> ShapeKind:
        """The kind of the underlying leaf shape."""

    @abstractmethod
    def render(self) -> None:
        """Print a description of the shape to stdout."""

    @abstractmethod
    def calculate_area(self) -> float:
        """Return the area of the shape."""

    @abstractmethod
    def bounds(self) -> np.ndarray:
        """
        Get the axis-aligned bounding box of the shape.

        Returns:
            Array of shape (2, 2): ``[[xmin, ymin], [xmax, ymax]]``
        """

    @abstractmethod
    def make_patch(self, **style: Any) -> "Patch":
        """Build the matplotlib patch for the shape using the given style."""

    def patch_style(self) -> Dict[str, Any]:
        """Keyword arguments used when building the matplotlib patch."""
        return {
            "fill": False,
            "edgecolor": OUTLINE_COLOR,
            "linewidth": OUTLINE_WIDTH,
        }

    def to_patch(self) -> "Patch":
        return self.make_patch(**self.patch_style())

    def to_png(
        self,
        file_name: Optional[str] = None,
        width: int = DEFAULT_PNG_WIDTH,
        height: int = DEFAULT_PNG_HEIGHT,
        margin: float = DEFAULT_PNG_MARGIN,
    ) -> None:
        """
        Render the shape to a PNG image.

        Args:
            file_name: Path to save the PNG file. If None, displays in a UI window instead.
            width: Image width in pixels (default: 800)
            height: Image height in pixels (default: 600)
            margin: Margin around the shape as a fraction of size (default: 0.1)

        Raises:
            ValueError: If a decorator color is not a known color
            ImportError: If matplotlib is not installed
        """
        try:
            import matplotlib.pyplot as plt
        except ImportError:
            raise ImportError(
                "matplotlib is required for shape rendering. Install with: pip install matplotlib"
            )

        # Invalid colors must fail before any figure is created
        patch = self.to_patch()

        fig, ax = plt.subplots(figsize=(width / DPI, height / DPI), dpi=DPI)
        ax.set_aspect("equal")
        ax.add_patch(patch)

        lower, upper = self.bounds()
        pad = (upper - lower).max() * margin
        ax.set_xlim(lower[0] - pad, upper[0] + pad)
        ax.set_ylim(lower[1] - pad, upper[1] + pad)
        ax.axis("off")
        ax.set_title(self.kind.value)

        if file_name is None:
            plt.show()
        else:
            fig.savefig(file_name, dpi=DPI)
            logger.info(f"Exported {self.kind.value} preview to {file_name}")
        plt.close(fig)
