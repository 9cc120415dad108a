"""
Configuration schema for shape files.

A shape file is a YAML document listing shapes by kind plus their dimensions,
and optionally the preferred output format.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import yaml

from shapekit_calculator import OutputFormat
from shapekit_calculator.logging import StructuredLogger, LogEvent, create_logger
from shapekit_geometry import AreaCapable, Describable

from .registry import ShapeRegistry, default_registry


def describe(shape: Any) -> Any:
    """Loggable form of a built shape; registries may hold non-Describable variants."""
    if isinstance(shape, Describable):
        return shape.to_dict()
    return repr(shape)


@dataclass(frozen=True)
class ShapeConfig:
    """One shape entry: kind name plus constructor parameters."""

    kind: str
    params: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate shape entry."""
        if not isinstance(self.kind, str) or not self.kind:
            raise ValueError(f"Shape kind must be a non-empty string, got {self.kind!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShapeConfig":
        """
        Parse a mapping like {"kind": "circle", "radius": 2}.

        Raises:
            ValueError: If data is not a mapping or 'kind' is missing
        """
        if not isinstance(data, dict):
            raise ValueError(f"Shape entry must be a mapping, got {type(data).__name__}")
        if "kind" not in data:
            raise ValueError(f"Shape entry missing 'kind': {data}")

        params = {key: value for key, value in data.items() if key != "kind"}
        return cls(kind=data["kind"], params=params)


@dataclass(frozen=True)
class CalculationConfig:
    """
    Main configuration for a calculation run.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    shapes: List[ShapeConfig] = field(default_factory=list)
    output_format: str = OutputFormat.TEXT.value

    def __post_init__(self):
        """Validate calculation configuration."""
        valid_formats = {fmt.value for fmt in OutputFormat}
        if self.output_format not in valid_formats:
            raise ValueError(
                f"Invalid output_format: {self.output_format}. "
                f"Must be one of {sorted(valid_formats)}"
            )

    @classmethod
    def from_yaml(
        cls,
        yaml_path: Union[str, Path],
        logger: Optional[StructuredLogger] = None
    ) -> "CalculationConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            output_format: "json"
            shapes:
              - kind: circle
                radius: 2
              - kind: square
                length: 5
              - kind: polygon
                vertices: [[0, 0], [4, 0], [4, 3]]

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML is malformed or has the wrong structure
        """
        logger = logger or create_logger("config")
        path = Path(yaml_path)

        if not path.exists():
            raise FileNotFoundError(f"Shape file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

        # Empty file means no shapes
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Shape file must contain a mapping, got {type(data).__name__}"
            )

        shapes_data = data.get("shapes") or []
        if not isinstance(shapes_data, list):
            raise ValueError(f"'shapes' must be a list, got {type(shapes_data).__name__}")

        config = cls(
            shapes=[ShapeConfig.from_dict(entry) for entry in shapes_data],
            output_format=data.get("output_format", OutputFormat.TEXT.value),
        )

        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded shape file",
            metadata={'path': str(path), 'shape_count': len(config.shapes)}
        )
        return config

    def build_shapes(
        self,
        registry: Optional[ShapeRegistry] = None,
        logger: Optional[StructuredLogger] = None
    ) -> List[AreaCapable]:
        """
        Build shape objects for every entry, in file order.

        Args:
            registry: Shape registry (default: default_registry())
            logger: Structured logger (default: "config" component logger)

        Raises:
            ShapeNotAvailableError: If an entry names an unknown kind
            ValueError: If an entry has invalid parameters
        """
        registry = registry or default_registry()
        logger = logger or create_logger("config")

        shapes = []
        for index, shape_config in enumerate(self.shapes):
            shape = registry.create(shape_config.kind, shape_config.params)
            logger.info(
                event=LogEvent.SHAPE_CREATED,
                message=f"Built {shape_config.kind}",
                metadata={'index': index, 'shape': describe(shape)}
            )
            shapes.append(shape)
        return shapes
