"""
shapekit_cli - Shape files and command line

Bounded Context: Host layer for the calculator
Responsibilities:
  - Load and validate YAML shape files
  - Build shapes from kind names (explicit registry)
  - Print calculation results as text or JSON

Architecture:
  - ShapeRegistry: Explicit registration of shape kinds
  - CalculationConfig / ShapeConfig: Frozen, validated configuration
  - cli.main: argparse entry point (`shapekit`)
"""

from .registry import ShapeRegistry, ShapeNotAvailableError, default_registry
from .config import CalculationConfig, ShapeConfig

__all__ = [
    "ShapeRegistry",
    "ShapeNotAvailableError",
    "default_registry",
    "CalculationConfig",
    "ShapeConfig",
]
