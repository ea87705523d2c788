"""
SOLID Shapes v1.0
=================

Bounded Context: A shape area calculator used to walk through the five
SOLID principles.

Design Philosophy:
- Single Responsibility: shapes measure, calculators add, printers format
- Open-Closed: new shapes plug in without touching the calculator
- Liskov Substitution: every Shape returns an area (NoShape shows the breach)
- Interface Segregation: area and volume are separate capabilities
- Dependency Inversion: Printer receives an AreaCalculator abstraction

Architecture:

    solid_shapes/
    ├── geometry/          # Shape value objects (immutable)
    │   └── shapes.py      # Shape, ThreeDimensionalShape, Square, ...
    │
    ├── analytics/         # Aggregation
    │   └── calculator.py  # AreaCalculator, ShapeAreaCalculator
    │
    ├── rendering/         # Formatting
    │   └── printer.py     # Printer
    │
    └── logging/           # Structured JSON logging

Usage:

    from solid_shapes import (
        Square, Circle, Rectangle, ShapeAreaCalculator, Printer,
    )

    printer = Printer(ShapeAreaCalculator())
    print(printer.get_sum_as_json(
        Square(length=10),
        Circle(radius=12),
        Rectangle(width=10, height=20),
    ))
"""

# Geometry Layer (immutable)
from solid_shapes.geometry.shapes import (
    Shape,
    ThreeDimensionalShape,
    Square,
    Rectangle,
    Circle,
    Cube,
    NoShape,
    InvalidStateError,
)

# Analytics Layer
from solid_shapes.analytics.calculator import AreaCalculator, ShapeAreaCalculator

# Rendering Layer
from solid_shapes.rendering.printer import Printer

__all__ = [
    # Geometry
    "Shape",
    "ThreeDimensionalShape",
    "Square",
    "Rectangle",
    "Circle",
    "Cube",
    "NoShape",
    "InvalidStateError",
    # Analytics
    "AreaCalculator",
    "ShapeAreaCalculator",
    # Rendering
    "Printer",
]

__version__ = "1.0.0"
