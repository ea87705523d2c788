"""
ShapeRegistry - Explicit shape registration pattern

Bounded Context: Mapping configuration names to shape constructors
Responsibilities:
  - Register shape kinds with factories
  - Validate kind existence before construction
  - Provide introspection (available_kinds, get_help)

Adding a shape means registering it here; the calculator and printer
never change.
"""

import inspect
from typing import Callable, Dict, Set

from solid_shapes.geometry.shapes import (
    Shape,
    Square,
    Rectangle,
    Circle,
    Cube,
    NoShape,
)


class ShapeNotAvailableError(Exception):
    """Raised when a configuration names an unregistered shape kind"""
    pass


class ShapeRegistry:
    """
    Registry of shape factories keyed by kind name.

    Example:
        registry = ShapeRegistry()
        registry.register('square', Square, "Square(length)")

        try:
            shape = registry.create('square', length=10)
        except ShapeNotAvailableError as e:
            print(f"Shape not available: {e}")
    """

    def __init__(self):
        self._factories: Dict[str, Callable[..., Shape]] = {}
        self._descriptions: Dict[str, str] = {}

    def register(
        self,
        kind: str,
        factory: Callable[..., Shape],
        description: str
    ) -> None:
        """
        Register a shape kind with its factory.

        Args:
            kind: Kind name (lowercase, no spaces)
            factory: Callable taking dimensions as keyword arguments
            description: Human-readable description for help text

        Raises:
            ValueError: If kind already registered
        """
        if kind in self._factories:
            raise ValueError(f"Shape kind '{kind}' already registered")

        self._factories[kind] = factory
        self._descriptions[kind] = description

    def create(self, kind: str, **dimensions: float) -> Shape:
        """
        Build a shape of the given kind.

        Raises:
            ShapeNotAvailableError: If kind not registered
            ValueError: If dimensions don't match the factory or are invalid
            TypeError: If a dimension is not a number
        """
        if kind not in self._factories:
            raise ShapeNotAvailableError(
                f"Shape kind '{kind}' not available. "
                f"Available kinds: {', '.join(sorted(self.available_kinds))}"
            )

        factory = self._factories[kind]
        try:
            inspect.signature(factory).bind(**dimensions)
        except TypeError as e:
            raise ValueError(f"Invalid dimensions for '{kind}': {e}") from e

        return factory(**dimensions)

    def is_available(self, kind: str) -> bool:
        return kind in self._factories

    @property
    def available_kinds(self) -> Set[str]:
        """Snapshot of registered kind names."""
        return set(self._factories.keys())

    def get_help(self) -> Dict[str, str]:
        """Copy of kind -> description."""
        return dict(self._descriptions)

    def count(self) -> int:
        return len(self._factories)


def default_registry() -> ShapeRegistry:
    """Registry with every built-in shape."""
    registry = ShapeRegistry()
    registry.register('square', Square, "Square(length): area = length^2")
    registry.register(
        'rectangle', Rectangle, "Rectangle(width, height): area = width * height"
    )
    registry.register('circle', Circle, "Circle(radius): area = pi * radius^2")
    registry.register(
        'cube', Cube, "Cube(edge): area = 6 * edge^2, volume = edge^3"
    )
    registry.register(
        'noshape', NoShape, "NoShape(): raises InvalidStateError (Liskov violation)"
    )
    return registry
