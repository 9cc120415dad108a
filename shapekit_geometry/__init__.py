"""
Geometry Layer
==============

Bounded Context: Shapes and their capabilities.

Responsibilities:
- Capability contracts (AreaCapable, VolumeCapable)
- Shape representation (immutable)
- Closed-form area / volume formulas
- NO aggregation, NO formatting

Design Philosophy:
- Capabilities are segregated: flat shapes never implement volume()
- Specializations with extra invariants (Square) are independent variants,
  never subtypes overriding a supertype's mutators
- Fail-fast validation at construction
- Zero side effects
"""

from shapekit_geometry.capabilities import AreaCapable, VolumeCapable, Describable
from shapekit_geometry.flat import Square, Rectangle, Circle, Polygon
from shapekit_geometry.solid import Cuboid, Sphere

__all__ = [
    "AreaCapable",
    "VolumeCapable",
    "Describable",
    "Square",
    "Rectangle",
    "Circle",
    "Polygon",
    "Cuboid",
    "Sphere",
]
