"""
Shape Aggregator Module
=======================

Sums a measurement over a capability-checked collection of shapes.

Design:
- Immutable snapshot of the collection (tuple)
- Capability checked per element at aggregation time, not assumed
- Atomic failure: InvalidShapeError, never a partial sum
- Pure: repeated sum() calls on the same calculator return the same value
- Closed for modification: new shape variants only implement a capability

Architecture:
    ShapeCalculator (abstract)
        ↓
    AreaCalculator (AreaCapable.area), VolumeCalculator (VolumeCapable.volume)
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Tuple, Union

from shapekit_geometry import AreaCapable, VolumeCapable

from .errors import InvalidShapeError
from .logging import StructuredLogger, LogEvent, create_logger

Number = Union[int, float]


class ShapeCalculator(ABC):
    """
    Abstract base for calculators over shape collections.

    Subclasses name the capability and the measurement; the iteration and
    checking loop lives here.

    Attributes:
        capability: Capability every element must implement
        quantity: Plural noun for what is summed (used by formatters)
        logger: Structured logger instance
    """

    capability: type = AreaCapable
    quantity = "areas"

    def __init__(
        self,
        shapes: Iterable[Any] = (),
        logger: Optional[StructuredLogger] = None
    ):
        """
        Initialize calculator.

        Args:
            shapes: Values claiming to be shapes (possibly empty)
            logger: Structured logger (default: "calculator" component logger)
        """
        self._shapes: Tuple[Any, ...] = tuple(shapes)
        self.logger = logger or create_logger("calculator")

    @property
    def shapes(self) -> Tuple[Any, ...]:
        """Shape collection snapshot (read-only)."""
        return self._shapes

    def __len__(self) -> int:
        return len(self._shapes)

    def with_shapes(self, *shapes: Any) -> 'ShapeCalculator':
        """
        Return a new calculator with extra shapes appended.

        The current calculator is left unchanged.
        """
        return type(self)(self._shapes + shapes, logger=self.logger)

    @abstractmethod
    def measure(self, shape: Any) -> Number:
        """Measurement of a single, already-checked shape."""
        raise NotImplementedError("Subclasses must implement measure()")

    def sum(self) -> Number:
        """
        Sum the measurement over every shape.

        Returns:
            Total (0 for an empty collection)

        Raises:
            InvalidShapeError: If any element does not implement the capability
        """
        total: Number = 0
        for index, shape in enumerate(self._shapes):
            if not isinstance(shape, self.capability):
                self.logger.warning(
                    event=LogEvent.SHAPE_REJECTED,
                    message=f"Element does not implement {self.capability.__name__}",
                    metadata={
                        'index': index,
                        'type': type(shape).__name__,
                        'calculator': type(self).__name__
                    }
                )
                raise InvalidShapeError(index, shape, self.capability.__name__)
            total += self.measure(shape)

        self.logger.info(
            event=LogEvent.SUM_COMPUTED,
            message=f"Computed sum of {self.quantity}",
            metadata={'shape_count': len(self._shapes), 'sum': total}
        )
        return total


class AreaCalculator(ShapeCalculator):
    """
    Sums the areas of provided shapes.

    Example:
        >>> calculator = AreaCalculator([Circle(radius=2), Square(length=5)])
        >>> round(calculator.sum(), 3)
        37.566
    """

    capability = AreaCapable
    quantity = "areas"

    def measure(self, shape: AreaCapable) -> Number:
        return shape.area()


class VolumeCalculator(ShapeCalculator):
    """Sums the volumes of provided (three-dimensional) shapes."""

    capability = VolumeCapable
    quantity = "volumes"

    def measure(self, shape: VolumeCapable) -> Number:
        return shape.volume()
