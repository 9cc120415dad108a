"""
Shape Capabilities
==================

Bounded Context: Capability Contracts

A shape declares only the capabilities it can honestly satisfy.

Design:
- AreaCapable: every measurable shape (flat or solid), area() and nothing else
- VolumeCapable: genuinely three-dimensional shapes only
- Describable: optional kind name + to_dict(), used for logging/serialization
- Flat shapes are never forced to implement volume()

Architecture:
    AreaCapable            VolumeCapable          Describable
        ↓                       ↓                      ↓
    Square, Rectangle,     Cuboid, Sphere         all built-in variants
    Circle, Polygon,
    Cuboid, Sphere
"""

import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import fields
from typing import Any, Dict

import numpy as np


class AreaCapable(ABC):
    """
    Capability: reports its own area.

    Subclasses compute area from their own attributes using the closed-form
    formula of the variant. The returned value is never negative.
    """

    @abstractmethod
    def area(self) -> float:
        """Area in square units."""
        raise NotImplementedError("Subclasses must implement area()")


class VolumeCapable(ABC):
    """Capability: reports its own volume (three-dimensional shapes)."""

    @abstractmethod
    def volume(self) -> float:
        """Volume in cubic units."""
        raise NotImplementedError("Subclasses must implement volume()")


class Describable:
    """
    Mixin for dataclass shapes: kind name plus JSON-compatible dict.

    Independent of the measuring capabilities; calculators never need it.
    """

    kind = "shape"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict (includes 'kind')."""
        data = {'kind': self.kind}
        for f in fields(self):
            data[f.name] = getattr(self, f.name)
        return data


def require_positive(shape: Any, *names: str) -> None:
    """
    Validate that every named dimension of a frozen shape is a positive,
    finite real number.

    Numpy scalars are stored back as the equivalent built-in number, so
    results computed from them stay JSON-serializable.

    Args:
        shape: Frozen dataclass instance being constructed
        *names: Dimension attribute names to check

    Raises:
        TypeError: If a dimension is not a real number
        ValueError: If a dimension is <= 0 or not finite
    """
    kind = getattr(shape, 'kind', type(shape).__name__)
    for name in names:
        value = getattr(shape, name)
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            raise TypeError(
                f"{kind} {name} must be a number, got {type(value).__name__}"
            )
        if isinstance(value, np.generic):
            value = value.item()
            object.__setattr__(shape, name, value)
        if not value > 0 or not math.isfinite(value):
            raise ValueError(f"{kind} {name} must be finite and > 0, got {value}")
