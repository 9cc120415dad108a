"""
shapekit CLI - Main entry point.

Provides command-line interface for summing areas/volumes of shape files.
"""

import argparse
import logging
import sys
from typing import List, Optional

from shapekit_calculator import (
    AreaCalculator,
    InvalidShapeError,
    OutputFormat,
    ResultFormatter,
    ShapekitError,
    VolumeCalculator,
)
from shapekit_calculator.logging import LogEvent, create_logger

from .config import CalculationConfig
from .registry import ShapeNotAvailableError, default_registry

CALCULATORS = {
    'area': AreaCalculator,
    'volume': VolumeCalculator,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="shapekit",
        description="shapekit CLI - Sum the areas or volumes of shapes in a YAML file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sum of areas, plain text
  shapekit area config/shapes.yaml

  # Sum of areas as JSON
  shapekit area config/shapes.yaml --format json

  # Sum of volumes (three-dimensional shapes only)
  shapekit volume config/solids.yaml

  # List shape kinds accepted in shape files
  shapekit kinds
"""
    )

    # Global arguments
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Structured log level (default: WARNING)"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    for command, calculator_cls in CALCULATORS.items():
        sub = subparsers.add_parser(
            command, help=f'Sum the {calculator_cls.quantity} of shapes in a file'
        )
        sub.add_argument('shape_file', help='Path to shape file YAML')
        sub.add_argument(
            '--format',
            dest='output_format',
            choices=[fmt.value for fmt in OutputFormat],
            default=None,
            help="Output format (default: file's output_format, else text)"
        )

    subparsers.add_parser('kinds', help='List registered shape kinds')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = create_logger("cli", level=getattr(logging, args.log_level))
    registry = default_registry()

    if args.command == 'kinds':
        for kind, description in sorted(registry.get_help().items()):
            print(f"{kind:<10} {description}")
        return 0

    try:
        config = CalculationConfig.from_yaml(args.shape_file, logger=logger)
        shapes = config.build_shapes(registry, logger=logger)

        calculator = CALCULATORS[args.command](shapes, logger=logger)
        formatter = ResultFormatter(calculator, logger=logger)
        print(formatter.render(args.output_format or config.output_format))

    except InvalidShapeError as e:
        logger.error(
            event=LogEvent.INVALID_SHAPE_ERROR,
            message="Calculation aborted",
            exc_info=e,
            metadata={'index': e.index, 'command': args.command}
        )
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    except ShapeNotAvailableError as e:
        logger.error(
            event=LogEvent.UNKNOWN_SHAPE_KIND,
            message="Unknown shape kind in shape file",
            exc_info=e
        )
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    except (ShapekitError, ValueError, OSError) as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Invalid shape file",
            exc_info=e,
            metadata={'shape_file': args.shape_file}
        )
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
