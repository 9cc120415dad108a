"""
Flat Shapes Module
==================

Pure two-dimensional shapes - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Each variant enforces its own invariant at construction
- Square is NOT a Rectangle subtype: it has one edge and no mutators
- Polygon area via shoelace formula (computed once at init)
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Sequence

import numpy as np

from shapekit_geometry.capabilities import AreaCapable, Describable, require_positive


@dataclass(frozen=True)
class Square(Describable, AreaCapable):
    """
    Immutable square with a single edge length.

    Attributes:
        length: Edge length (positive)

    Example:
        >>> Square(length=5).area()
        25
    """

    length: float

    kind = "square"

    def __post_init__(self):
        """Validate edge length."""
        require_positive(self, "length")

    def area(self) -> float:
        return self.length ** 2


@dataclass(frozen=True)
class Rectangle(Describable, AreaCapable):
    """
    Immutable rectangle with independent width and height.

    Attributes:
        width: Horizontal side (positive)
        height: Vertical side (positive)
    """

    width: float
    height: float

    kind = "rectangle"

    def __post_init__(self):
        """Validate sides."""
        require_positive(self, "width", "height")

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Circle(Describable, AreaCapable):
    """
    Immutable circle.

    Attributes:
        radius: Circle radius (positive)
    """

    radius: float

    kind = "circle"

    def __post_init__(self):
        """Validate radius."""
        require_positive(self, "radius")

    def area(self) -> float:
        return math.pi * self.radius ** 2


@dataclass(frozen=True, eq=False)
class Polygon(Describable, AreaCapable):
    """
    Immutable simple polygon with precomputed area.

    Design:
    - Area computed once at init (shoelace formula)
    - Vertices copied to a read-only float array
    - Vertex order may be clockwise or counter-clockwise

    Attributes:
        vertices: Nx2 array of (x, y) polygon vertices

    Example:
        >>> Polygon.from_points([(0, 0), (4, 0), (4, 3)]).area()
        6.0
    """

    vertices: np.ndarray

    kind = "polygon"

    def __post_init__(self):
        """Validate vertices and precompute area."""
        if not isinstance(self.vertices, np.ndarray):
            raise TypeError(f"vertices must be np.ndarray, got {type(self.vertices)}")
        if self.vertices.ndim != 2 or self.vertices.shape[1] != 2:
            raise ValueError(f"vertices must be Nx2 array, got shape {self.vertices.shape}")
        if len(self.vertices) < 3:
            raise ValueError(f"Polygon must have at least 3 vertices, got {len(self.vertices)}")

        # Private read-only copy (using object.__setattr__ for frozen dataclass)
        vertices = self.vertices.astype(float)
        if not np.all(np.isfinite(vertices)):
            raise ValueError("Polygon vertices must be finite")
        vertices.flags.writeable = False
        object.__setattr__(self, 'vertices', vertices)
        object.__setattr__(self, '_area', self._shoelace(vertices))

    @staticmethod
    def _shoelace(vertices: np.ndarray) -> float:
        """
        Shoelace formula: 0.5 * |sum(x_i * y_i+1 - x_i+1 * y_i)|

        Returns:
            Enclosed area (0.0 for degenerate polygons)
        """
        x, y = vertices[:, 0], vertices[:, 1]
        cross = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
        return float(abs(cross) / 2.0)

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> 'Polygon':
        """Build a polygon from a list of (x, y) pairs."""
        return cls(vertices=np.asarray(list(points), dtype=float))

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def area(self) -> float:
        return self._area

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {'kind': self.kind, 'vertices': self.vertices.tolist()}
