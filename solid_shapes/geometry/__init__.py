"""
Geometry Layer
==============

Bounded Context: Shape value objects and their capabilities.

Responsibilities:
- Shape representation (immutable)
- Area (Shape) and volume (ThreeDimensionalShape) capabilities
- NO aggregation, NO formatting

Design Philosophy:
- Small capability interfaces (one method each)
- Immutable data structures
- Fail-fast validation
"""

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

__all__ = [
    "Shape",
    "ThreeDimensionalShape",
    "Square",
    "Rectangle",
    "Circle",
    "Cube",
    "NoShape",
    "InvalidStateError",
]
