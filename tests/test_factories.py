import pytest

from shapekit.factories import (
    CircleFactory,
    RectangleFactory,
    ShapeFactory,
    get_factory,
    list_factories,
)
from shapekit.primitives import Circle, Rectangle


def test_rectangle_factory():
    shape = RectangleFactory().create_shape()
    assert isinstance(shape, Rectangle)
    assert shape.width == 5.0
    assert shape.height == 10.0


def test_circle_factory():
    shape = CircleFactory().create_shape()
    assert isinstance(shape, Circle)
    assert shape.radius == 7.0


def test_factory_returns_new_instance():
    factory = CircleFactory()
    assert factory.create_shape() is not factory.create_shape()


def test_shape_factory_is_abstract():
    with pytest.raises(TypeError):
        ShapeFactory()


@pytest.mark.parametrize(
    "name,factory_class",
    [
        ("rectangle", RectangleFactory),
        ("Circle", CircleFactory),
        ("  RECTANGLE ", RectangleFactory),
    ],
)
def test_get_factory(name, factory_class):
    assert isinstance(get_factory(name), factory_class)


def test_get_factory_unknown():
    with pytest.raises(ValueError, match="Available: circle, rectangle"):
        get_factory("triangle")


def test_list_factories():
    assert list_factories() == ["circle", "rectangle"]
