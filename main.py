"""
SOLID Shapes Demo
=================

Sums a square, a circle, a rectangle and a cube through the Printer.

Architecture:
- geometry: Square, Circle, Rectangle, Cube (immutable shapes)
- analytics: ShapeAreaCalculator (behind the AreaCalculator abstraction)
- rendering: Printer (depends only on AreaCalculator)
"""

from solid_shapes import (
    Square,
    Circle,
    Rectangle,
    Cube,
    ShapeAreaCalculator,
    Printer,
)


def main():
    area_calculator = ShapeAreaCalculator()

    # Printer receives the abstraction, not a concrete dependency it builds itself
    printer = Printer(area_calculator)

    rectangle = Rectangle(width=10, height=20)
    square = Square(length=10)
    circle = Circle(radius=12)
    cube = Cube(edge=6)

    print(printer.get_sum_as_json(square, circle, rectangle, cube))


if __name__ == "__main__":
    main()
