"""
shapekit Calculator Package
===========================

Bounded Context: Aggregation and Presentation

Sums areas (or volumes) over capability-checked shape collections and renders
the result as plain text or JSON.

Architecture:
- aggregator: ShapeCalculator, AreaCalculator, VolumeCalculator
- formatter: ResultFormatter, OutputFormat
- errors: ShapekitError, InvalidShapeError
- logging/: Structured JSON logging for observability

Design Philosophy:
- Single responsibility: calculators compute, formatters present
- Open for extension: new shapes implement a capability, nothing else changes
- Fail-fast: an invalid element aborts the whole calculation

Example:
    >>> from shapekit_geometry import Circle, Square
    >>> from shapekit_calculator import AreaCalculator, ResultFormatter
    >>>
    >>> calculator = AreaCalculator([Circle(radius=2), Square(length=5), Square(length=6)])
    >>> formatter = ResultFormatter(calculator)
    >>> print(formatter.as_plain_text())
    Sum of the areas of provided shapes: 73.56637061435917
    >>> print(formatter.as_structured())
    {"sum": 73.56637061435917}
"""

# Version
__version__ = "1.0.0"

from .errors import ShapekitError, InvalidShapeError
from .aggregator import ShapeCalculator, AreaCalculator, VolumeCalculator
from .formatter import ResultFormatter, OutputFormat
from .logging import LogEvent, StructuredLogger, create_logger

__all__ = [
    # Version
    '__version__',
    # Errors
    'ShapekitError',
    'InvalidShapeError',
    # Calculators
    'ShapeCalculator',
    'AreaCalculator',
    'VolumeCalculator',
    # Presentation
    'ResultFormatter',
    'OutputFormat',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
