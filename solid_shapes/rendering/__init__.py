"""
Rendering Layer
===============

Bounded Context: Turning aggregate results into text.

Design Philosophy:
- Stateless formatting
- Depends on abstractions (AreaCalculator), not implementations
"""

from solid_shapes.rendering.printer import Printer, SUM_TEMPLATE

__all__ = [
    "Printer",
    "SUM_TEMPLATE",
]
