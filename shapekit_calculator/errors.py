"""
Calculator errors.

InvalidShapeError is the only failure a calculation can produce. It is a
programming/input error: surfaced to the caller, never retried.
"""

from typing import Any


class ShapekitError(Exception):
    """Base class for shapekit errors"""
    pass


class InvalidShapeError(ShapekitError):
    """
    Raised when an element of a shape collection lacks the required capability.

    Attributes:
        index: Position of the offending element in the collection
        value: The offending element itself
        capability: Name of the capability it failed (e.g. "AreaCapable")
    """

    def __init__(self, index: int, value: Any, capability: str = "AreaCapable"):
        self.index = index
        self.value = value
        self.capability = capability
        super().__init__(
            f"Invalid shape provided at index {index}: {value!r} "
            f"({type(value).__name__}) does not implement {capability}"
        )
