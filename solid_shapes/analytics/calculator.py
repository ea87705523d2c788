"""
Area Calculator Module
======================

Reduces a sequence of shapes to a single total area.

Design:
- AreaCalculator is the abstraction consumers depend on
- ShapeAreaCalculator is the one concrete implementation
- Shape failures propagate unmodified (logged, never swallowed)
- Logger injected, optional
"""

from abc import ABC, abstractmethod
from typing import Optional

from solid_shapes.geometry.shapes import Shape, InvalidStateError
from solid_shapes.logging import LogEvent, StructuredLogger


class AreaCalculator(ABC):
    """Aggregation capability: sum the areas of shapes."""

    @abstractmethod
    def sum(self, *shapes: Shape) -> float:
        """
        Return the summed area of all shapes.

        An empty call returns 0.0.
        """


class ShapeAreaCalculator(AreaCalculator):
    """
    Running-total implementation of AreaCalculator.

    Single responsibility: it only adds areas together. Formatting the
    result belongs to Printer.

    Usage:
        calculator = ShapeAreaCalculator()
        calculator.sum(Square(10), Circle(12))  # 100 + 144*pi
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        """
        Args:
            logger: Optional structured logger for calculation events
        """
        self._logger = logger

    def sum(self, *shapes: Shape) -> float:
        total = 0.0
        for shape in shapes:
            try:
                total += shape.area()
            except InvalidStateError as e:
                if self._logger:
                    self._logger.error(
                        event=LogEvent.SHAPE_INVALID_STATE,
                        message="Shape could not provide an area",
                        metadata={'shape': type(shape).__name__},
                        exc_info=e,
                    )
                raise

        if self._logger:
            self._logger.debug(
                event=LogEvent.CALCULATION_COMPLETED,
                message="Summed shape areas",
                metadata={'shape_count': len(shapes), 'total': total},
            )
        return total
