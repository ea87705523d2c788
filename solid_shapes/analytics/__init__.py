"""
Analytics Layer
===============

Bounded Context: Aggregating shape measurements.

Responsibilities:
- Sum shape areas behind the AreaCalculator abstraction
- Propagate shape failures unchanged
"""

from solid_shapes.analytics.calculator import AreaCalculator, ShapeAreaCalculator

__all__ = [
    "AreaCalculator",
    "ShapeAreaCalculator",
]
