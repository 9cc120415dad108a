"""
Area Report Demo
================

Demonstrates shapekit usage end to end.

Example: Sum the areas of a circle and two squares, then render as text
and JSON. Adds a polygon without touching the calculator, and shows an
invalid element aborting the calculation.

Architecture:
- geometry: Square, Circle, Polygon, Cuboid (immutable shapes)
- calculator: AreaCalculator, VolumeCalculator (aggregation)
- formatter: ResultFormatter (presentation)
"""

import logging

from shapekit_geometry import Circle, Cuboid, Polygon, Sphere, Square
from shapekit_calculator import (
    AreaCalculator,
    InvalidShapeError,
    ResultFormatter,
    VolumeCalculator,
    create_logger,
)


def main():
    """Run the area report."""
    logger = create_logger("demo", level=logging.WARNING)

    # 1. Shapes are built once, immutable afterwards
    shapes = [
        Circle(radius=2),
        Square(length=5),
        Square(length=6),
    ]

    # 2. Calculator only sums, formatter only presents
    calculator = AreaCalculator(shapes, logger=logger)
    formatter = ResultFormatter(calculator, logger=logger)

    print(formatter.as_plain_text())
    print(formatter.as_structured())

    # 3. New variant, same calculator code
    triangle = Polygon.from_points([(0, 0), (4, 0), (4, 3)])
    extended = calculator.with_shapes(triangle)
    print(ResultFormatter(extended, logger=logger).as_plain_text())

    # 4. Only solids have volume
    solids = VolumeCalculator([Cuboid(length=2, width=3, height=4), Sphere(radius=1)], logger=logger)
    print(ResultFormatter(solids, logger=logger).as_plain_text())

    # 5. Invalid element: no partial sum
    broken = AreaCalculator([Square(length=5), "not-a-shape"], logger=logger)
    try:
        broken.sum()
    except InvalidShapeError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    main()
