"""
Geometric Shapes Module
========================

Pure geometric value objects - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Capability abstractions: Shape (area) and ThreeDimensionalShape (volume)
- Interface segregation: only Cube implements both capabilities
- Fail-fast validation of dimensions at construction

Liskov note:
    NoShape implements Shape but raises InvalidStateError from area().
    It narrows the base contract (a normal return replaced by a failure)
    and exists only as a negative example.
"""

import numpy as np
from abc import ABC, abstractmethod
from dataclasses import dataclass


class InvalidStateError(Exception):
    """Raised when a shape is asked for a value it cannot define."""
    pass


def _validate_dimension(shape_name: str, field_name: str, value) -> float:
    """
    Check a single dimension and return it as float.

    Raises:
        TypeError: If value is not a real number
        ValueError: If value is negative or not a finite float
    """
    if isinstance(value, bool) or not isinstance(
        value, (int, float, np.integer, np.floating)
    ):
        raise TypeError(
            f"{shape_name} {field_name} must be a number, got {type(value).__name__}"
        )
    try:
        number = float(value)
    except OverflowError as e:
        raise ValueError(f"{shape_name} {field_name} is too large, got {value}") from e
    if not np.isfinite(number):
        raise ValueError(f"{shape_name} {field_name} must be finite, got {value}")
    if number < 0:
        raise ValueError(f"{shape_name} {field_name} must be >= 0, got {value}")
    return number


class Shape(ABC):
    """Capability: anything with a two-dimensional area."""

    @abstractmethod
    def area(self) -> float:
        """Return the area as a float."""


class ThreeDimensionalShape(ABC):
    """
    Capability: anything with a volume.

    Kept separate from Shape so flat shapes are never forced to
    implement a meaningless volume().
    """

    @abstractmethod
    def volume(self) -> float:
        """Return the volume as a float."""


@dataclass(frozen=True)
class Square(Shape):
    """
    Immutable square.

    Attributes:
        length: Side length (>= 0)

    Example:
        >>> Square(length=10).area()
        100.0
    """

    length: float

    def __post_init__(self):
        """Validate and normalize dimensions."""
        object.__setattr__(
            self, 'length', _validate_dimension("Square", "length", self.length)
        )

    def area(self) -> float:
        return self.length * self.length


@dataclass(frozen=True)
class Rectangle(Shape):
    """
    Immutable rectangle.

    Attributes:
        width: Rectangle width (>= 0)
        height: Rectangle height (>= 0)
    """

    width: float
    height: float

    def __post_init__(self):
        """Validate and normalize dimensions."""
        object.__setattr__(
            self, 'width', _validate_dimension("Rectangle", "width", self.width)
        )
        object.__setattr__(
            self, 'height', _validate_dimension("Rectangle", "height", self.height)
        )

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Circle(Shape):
    """
    Immutable circle.

    Attributes:
        radius: Circle radius (>= 0)
    """

    radius: float

    def __post_init__(self):
        object.__setattr__(
            self, 'radius', _validate_dimension("Circle", "radius", self.radius)
        )

    def area(self) -> float:
        return float(np.pi * self.radius * self.radius)


@dataclass(frozen=True)
class Cube(Shape, ThreeDimensionalShape):
    """
    Immutable cube - the only shape with both capabilities.

    area() is the total surface area (six faces).

    Attributes:
        edge: Edge length (>= 0)

    Example:
        >>> cube = Cube(edge=6)
        >>> cube.area(), cube.volume()
        (216.0, 216.0)
    """

    edge: float

    def __post_init__(self):
        object.__setattr__(
            self, 'edge', _validate_dimension("Cube", "edge", self.edge)
        )

    def area(self) -> float:
        return 6 * self.edge * self.edge

    def volume(self) -> float:
        return self.edge * self.edge * self.edge


@dataclass(frozen=True)
class NoShape(Shape):
    """
    Broken substitute for Shape (Liskov violation).

    Any caller that treats it as a Shape gets an exception instead of
    an area. Do not model real entities this way.
    """

    def area(self) -> float:
        raise InvalidStateError("Undefined state: NoShape has no area")
