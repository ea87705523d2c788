"""
Printer Module
==============

Formats an aggregate area as JSON-shaped text.

Design:
- Depends on the AreaCalculator abstraction, never on a concrete class
- Calculator injected through the constructor (dependency inversion)
- Returns a string; writes nothing to any stream
"""

from typing import Optional

from solid_shapes.analytics.calculator import AreaCalculator
from solid_shapes.geometry.shapes import Shape
from solid_shapes.logging import LogEvent, StructuredLogger


SUM_TEMPLATE = "{{\n    sum: {value}\n}}"


class Printer:
    """
    Formatting consumer of an AreaCalculator.

    Example:
        >>> printer = Printer(ShapeAreaCalculator())
        >>> print(printer.get_sum_as_json(Square(10)))
        {
            sum: 100.0
        }
    """

    def __init__(
        self,
        area_calculator: AreaCalculator,
        logger: Optional[StructuredLogger] = None
    ):
        """
        Args:
            area_calculator: Any AreaCalculator implementation
            logger: Optional structured logger
        """
        self._area_calculator = area_calculator
        self._logger = logger

    def get_sum_as_json(self, *shapes: Shape) -> str:
        """
        Sum the shapes' areas and embed the result in the template.

        Raises:
            Whatever the calculator (or a shape) raises, unmodified.
        """
        result = self._area_calculator.sum(*shapes)

        if self._logger:
            self._logger.debug(
                event=LogEvent.PRINTER_FORMATTED,
                message="Formatted sum",
                metadata={'sum': result},
            )
        return SUM_TEMPLATE.format(value=result)
