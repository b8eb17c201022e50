import pytest
from matplotlib.colors import to_rgba
from PIL import Image

from shapekit.constants import BORDER_WIDTH, OUTLINE_WIDTH
from shapekit.decorators import BorderDecorator, ColorDecorator
from shapekit.primitives import Circle, Rectangle


class TestPatchStyle:
    def test_plain_shape_is_outline(self):
        patch = Rectangle(5, 10).to_patch()
        assert patch.get_fill() is False
        assert patch.get_linewidth() == OUTLINE_WIDTH

    def test_color_fills_shape(self):
        patch = ColorDecorator(Circle(7), "Vermelho").to_patch()
        assert patch.get_fill() is True
        assert tuple(patch.get_facecolor()) == to_rgba("red")

    def test_matplotlib_color_names_accepted(self):
        patch = ColorDecorator(Circle(7), "tab:orange").to_patch()
        assert tuple(patch.get_facecolor()) == to_rgba("tab:orange")

    def test_border_thickens_outline(self):
        patch = BorderDecorator(ColorDecorator(Rectangle(5, 10), "Azul")).to_patch()
        assert patch.get_linewidth() == BORDER_WIDTH
        assert tuple(patch.get_facecolor()) == to_rgba("blue")

    def test_unknown_color(self):
        with pytest.raises(ValueError, match="Unknown color 'Magentoso'"):
            ColorDecorator(Circle(7), "Magentoso").to_patch()


class TestToPng:
    def test_default_size(self, tmp_path):
        file_name = tmp_path / "rectangle.png"
        BorderDecorator(ColorDecorator(Rectangle(5, 10), "Azul")).to_png(str(file_name))
        with Image.open(file_name) as image:
            assert image.size == (800, 600)

    def test_custom_size(self, tmp_path):
        file_name = tmp_path / "circle.png"
        Circle(7).to_png(str(file_name), width=400, height=300, margin=0.2)
        with Image.open(file_name) as image:
            assert image.size == (400, 300)

    def test_unknown_color_writes_nothing(self, tmp_path):
        file_name = tmp_path / "bad.png"
        with pytest.raises(ValueError):
            ColorDecorator(Circle(7), "Magentoso").to_png(str(file_name))
        assert not file_name.exists()
