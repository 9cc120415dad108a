"""
Result Formatter
================

Bounded Context: Presentation

Renders a calculator's sum for output. The calculator knows nothing about
output formats; new representations are added here only.

Design:
- Non-owning reference to one calculator, no other state
- sum() is called fresh on every render (no caching)
- InvalidShapeError propagates to the caller unchanged
"""

import json
from enum import Enum
from typing import Callable, Dict, Optional, Union

from .aggregator import ShapeCalculator
from .logging import StructuredLogger, LogEvent, create_logger


class OutputFormat(str, Enum):
    """Output representation."""
    TEXT = "text"
    JSON = "json"


class ResultFormatter:
    """
    Formats the sum computed by a calculator.

    Example:
        >>> formatter = ResultFormatter(AreaCalculator([Square(length=5)]))
        >>> formatter.as_plain_text()
        'Sum of the areas of provided shapes: 25'
        >>> formatter.as_structured()
        '{"sum": 25}'
    """

    def __init__(
        self,
        calculator: ShapeCalculator,
        logger: Optional[StructuredLogger] = None
    ):
        self.calculator = calculator
        self.logger = logger or create_logger("formatter")

    @property
    def label(self) -> str:
        return f"Sum of the {self.calculator.quantity} of provided shapes: "

    def as_plain_text(self) -> str:
        """Human-readable label followed by the sum."""
        return f"{self.label}{self.calculator.sum()}"

    def as_structured(self) -> str:
        """JSON object with a single 'sum' field."""
        return json.dumps({'sum': self.calculator.sum()})

    def render(self, output_format: Union[OutputFormat, str]) -> str:
        """
        Render in the requested representation.

        Args:
            output_format: OutputFormat or its string value ("text", "json")

        Returns:
            Rendered string

        Raises:
            ValueError: If output_format is unknown
            InvalidShapeError: Propagated from the calculator
        """
        output_format = OutputFormat(output_format)
        renderers: Dict[OutputFormat, Callable[[], str]] = {
            OutputFormat.TEXT: self.as_plain_text,
            OutputFormat.JSON: self.as_structured,
        }

        rendered = renderers[output_format]()
        self.logger.info(
            event=LogEvent.RESULT_RENDERED,
            message="Rendered calculation result",
            metadata={'format': output_format.value, 'length': len(rendered)}
        )
        return rendered
