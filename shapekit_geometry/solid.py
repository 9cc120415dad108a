"""
Solid Shapes Module
===================

Three-dimensional shapes: surface area AND volume.

Only these variants implement VolumeCapable; flat shapes never do.
"""

import math
from dataclasses import dataclass

from shapekit_geometry.capabilities import (
    AreaCapable,
    Describable,
    VolumeCapable,
    require_positive,
)


@dataclass(frozen=True)
class Cuboid(Describable, AreaCapable, VolumeCapable):
    """
    Immutable rectangular cuboid.

    area() is the total surface area of the six faces.

    Attributes:
        length: Edge along x (positive)
        width: Edge along y (positive)
        height: Edge along z (positive)
    """

    length: float
    width: float
    height: float

    kind = "cuboid"

    def __post_init__(self):
        """Validate edges."""
        require_positive(self, "length", "width", "height")

    def area(self) -> float:
        lw = self.length * self.width
        lh = self.length * self.height
        wh = self.width * self.height
        return 2 * (lw + lh + wh)

    def volume(self) -> float:
        return self.length * self.width * self.height


@dataclass(frozen=True)
class Sphere(Describable, AreaCapable, VolumeCapable):
    """Immutable sphere; area() is the surface area 4*pi*r^2."""

    radius: float

    kind = "sphere"

    def __post_init__(self):
        require_positive(self, "radius")

    def area(self) -> float:
        return 4 * math.pi * self.radius ** 2

    def volume(self) -> float:
        return 4 / 3 * math.pi * self.radius ** 3
