"""
Test SOLID Shapes CLI (config, registry, entry point)
=====================================================

Usage:
    pytest test_solid_shapes_cli.py
"""

import logging
import math
import textwrap

import pytest

from solid_shapes import Circle, Cube, NoShape, Rectangle, Square
from solid_shapes_cli.cli import demo_shapes, main, sum_volumes
from solid_shapes_cli.config import CalculatorConfig, ShapeConfig
from solid_shapes_cli.registry import (
    ShapeNotAvailableError,
    ShapeRegistry,
    default_registry,
)


@pytest.fixture(autouse=True)
def _fresh_log_handlers():
    # Handlers bind sys.stderr when created; rebind to this test's capture
    for name in ("solid_shapes.cli", "solid_shapes.calculator"):
        logging.getLogger(name).handlers.clear()
    yield


def _write(tmp_path, body: str):
    path = tmp_path / "shapes.yaml"
    path.write_text(textwrap.dedent(body))
    return path


# ========== Registry ==========

def test_default_registry_kinds():
    registry = default_registry()

    assert registry.available_kinds == {"square", "rectangle", "circle", "cube", "noshape"}
    assert registry.count() == 5
    assert registry.is_available("circle")
    assert not registry.is_available("triangle")
    assert set(registry.get_help()) == registry.available_kinds


def test_registry_creates_shapes():
    registry = default_registry()

    assert registry.create("square", length=10) == Square(length=10)
    assert registry.create("rectangle", width=2, height=3) == Rectangle(width=2, height=3)
    assert registry.create("circle", radius=1) == Circle(radius=1)
    assert registry.create("cube", edge=6) == Cube(edge=6)
    assert isinstance(registry.create("noshape"), NoShape)


def test_registry_rejects_unknown_kind():
    with pytest.raises(ShapeNotAvailableError, match="triangle"):
        default_registry().create("triangle", base=1, height=2)


def test_registry_rejects_bad_dimension_names():
    registry = default_registry()

    with pytest.raises(ValueError, match="square"):
        registry.create("square", side=10)
    with pytest.raises(ValueError, match="rectangle"):
        registry.create("rectangle", width=1)


def test_registry_double_registration():
    registry = ShapeRegistry()
    registry.register("square", Square, "Square")

    with pytest.raises(ValueError, match="already registered"):
        registry.register("square", Square, "Square again")


# ========== Config ==========

def test_config_from_yaml(tmp_path):
    path = _write(tmp_path, """
        log_level: info
        shapes:
          - kind: square
            dimensions: {length: 10}
          - kind: noshape
    """)

    config = CalculatorConfig.from_yaml(path)

    assert config.log_level == "INFO"
    assert config.shapes == [
        ShapeConfig(kind="square", dimensions={"length": 10}),
        ShapeConfig(kind="noshape", dimensions={}),
    ]


def test_config_parses_bare_exponents(tmp_path):
    path = _write(tmp_path, """
        shapes:
          - kind: circle
            dimensions: {radius: 1e3}
          - kind: square
            dimensions: {length: wide}
    """)

    config = CalculatorConfig.from_yaml(path)

    assert config.shapes[0].dimensions == {"radius": 1000.0}
    assert config.shapes[1].dimensions == {"length": "wide"}


def test_config_defaults_for_empty_file(tmp_path):
    config = CalculatorConfig.from_yaml(_write(tmp_path, ""))

    assert config.shapes == []
    assert config.log_level == "WARNING"


def test_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CalculatorConfig.from_yaml(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "body",
    [
        "shapes: [unclosed",
        "- just\n- a list\n",
        "shapes: {kind: square}\n",
        "shapes:\n  - dimensions: {length: 1}\n",
        "shapes:\n  - 42\n",
        "log_level: LOUD\n",
    ],
)
def test_config_invalid(tmp_path, body):
    with pytest.raises(ValueError):
        CalculatorConfig.from_yaml(_write(tmp_path, body))


# ========== CLI ==========

def test_demo_shapes_match_example():
    assert demo_shapes() == [
        Square(length=10),
        Circle(radius=12),
        Rectangle(width=10, height=20),
        Cube(edge=6),
    ]


def test_sum_volumes_skips_flat_shapes():
    assert sum_volumes([Square(length=3), Cube(edge=2), Cube(edge=3)]) == 35.0
    assert sum_volumes([]) == 0.0


def test_cli_demo(capsys):
    assert main(["demo"]) == 0

    out = capsys.readouterr().out
    value = float(out.split("sum:")[1].split()[0])
    assert value == pytest.approx(300 + 144 * math.pi + 216)
    assert out.startswith("{\n    sum: ")


def test_cli_sum(tmp_path, capsys):
    path = _write(tmp_path, """
        shapes:
          - kind: square
            dimensions: {length: 10}
          - kind: rectangle
            dimensions: {width: 10, height: 20}
    """)

    assert main(["sum", str(path)]) == 0
    assert capsys.readouterr().out == "{\n    sum: 300.0\n}\n"


def test_cli_sum_huge_dimensions(tmp_path, capsys):
    path = _write(tmp_path, """
        shapes:
          - kind: square
            dimensions: {length: 1.0e+200}
          - kind: circle
            dimensions: {radius: 1e3}
    """)

    assert main(["sum", str(path)]) == 0
    assert capsys.readouterr().out == "{\n    sum: inf\n}\n"


def test_cli_volume(tmp_path, capsys):
    path = _write(tmp_path, """
        shapes:
          - kind: square
            dimensions: {length: 10}
          - kind: cube
            dimensions: {edge: 6}
    """)

    assert main(["volume", str(path)]) == 0
    assert capsys.readouterr().out == "{\n    volume: 216.0\n}\n"


def test_cli_kinds(capsys):
    assert main(["kinds"]) == 0

    out = capsys.readouterr().out
    for kind in ("square", "rectangle", "circle", "cube", "noshape"):
        assert kind in out


def test_cli_no_command(capsys):
    assert main([]) == 1


def test_cli_invalid_state(tmp_path, capsys):
    path = _write(tmp_path, """
        shapes:
          - kind: noshape
    """)

    assert main(["sum", str(path)]) == 1
    assert "Error: Undefined state" in capsys.readouterr().err


def test_cli_unknown_kind(tmp_path, capsys):
    path = _write(tmp_path, """
        shapes:
          - kind: triangle
            dimensions: {base: 1, height: 2}
    """)

    assert main(["sum", str(path)]) == 1
    assert "not available" in capsys.readouterr().err


def test_cli_negative_dimension(tmp_path, capsys):
    path = _write(tmp_path, """
        shapes:
          - kind: circle
            dimensions: {radius: -1}
    """)

    assert main(["sum", str(path)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_missing_config(tmp_path, capsys):
    assert main(["sum", str(tmp_path / "nope.yaml")]) == 1
    assert "Config file not found" in capsys.readouterr().err
