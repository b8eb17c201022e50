import math
import subprocess
import sys

import pytest

from shapekit import cli
from shapekit.exceptions import UnsupportedShapeError
from shapekit.strategies import RectangleAreaStrategy


def test_demo_output(capsys):
    assert cli.main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:6] == [
        "Drawing a Rectangle",
        "Applying color Azul to the shape.",
        "Adding border to the shape.",
        "Drawing a Circle",
        "Applying color Vermelho to the shape.",
        "Adding border to the shape.",
    ]
    assert lines[6] == "Rectangle area: 50.0"
    label, value = lines[7].split(": ")
    assert label == "Circle area"
    assert math.isclose(float(value), 49 * math.pi)
    assert len(lines) == 8


def test_demo_fails_loudly_on_mismatch(monkeypatch):
    monkeypatch.setattr(cli, "CircleAreaStrategy", RectangleAreaStrategy)
    with pytest.raises(UnsupportedShapeError):
        cli.run_demo()


def test_module_entry_point():
    result = subprocess.run(
        [sys.executable, "-m", "shapekit"], capture_output=True, text=True
    )
    assert result.returncode == 0
    assert result.stdout.splitlines()[6] == "Rectangle area: 50.0"
