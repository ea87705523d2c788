"""
SOLID Shapes CLI - Main entry point.

Builds shapes from a YAML config (or the built-in demo set) and prints
their summed area through Printer.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from solid_shapes.analytics.calculator import ShapeAreaCalculator
from solid_shapes.geometry.shapes import (
    Shape,
    ThreeDimensionalShape,
    Square,
    Rectangle,
    Circle,
    Cube,
    InvalidStateError,
)
from solid_shapes.logging import LogEvent, StructuredLogger, create_logger
from solid_shapes.rendering.printer import Printer

from .config import CalculatorConfig, VALID_LOG_LEVELS
from .registry import ShapeRegistry, ShapeNotAvailableError, default_registry


def demo_shapes() -> List[Shape]:
    """The canonical example set: square, circle, rectangle and cube."""
    return [
        Square(length=10),
        Circle(radius=12),
        Rectangle(width=10, height=20),
        Cube(edge=6),
    ]


def build_shapes(
    config: CalculatorConfig,
    registry: ShapeRegistry,
    logger: StructuredLogger
) -> List[Shape]:
    """
    Construct every configured shape through the registry.

    Raises:
        ShapeNotAvailableError: If a kind is not registered
        ValueError, TypeError: If dimensions are invalid
    """
    shapes = []
    for shape_config in config.shapes:
        shape = registry.create(shape_config.kind, **shape_config.dimensions)
        logger.debug(
            event=LogEvent.SHAPE_CREATED,
            message=f"Created {shape_config.kind}",
            metadata={'kind': shape_config.kind, 'dimensions': shape_config.dimensions},
        )
        shapes.append(shape)
    return shapes


def sum_volumes(shapes: Sequence[Shape]) -> float:
    """Summed volume of the shapes that have one; flat shapes are skipped."""
    total = 0.0
    for shape in shapes:
        if isinstance(shape, ThreeDimensionalShape):
            total += shape.volume()
    return total


def _resolve_level(cli_level: Optional[str], config: Optional[CalculatorConfig]) -> int:
    if cli_level:
        return getattr(logging, cli_level)
    if config is not None:
        return config.logging_level
    return logging.WARNING


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solid-shapes",
        description="SOLID Shapes - sum shape areas and print them as JSON-like text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sum areas of shapes listed in a YAML config
  solid-shapes sum config/shapes.yaml

  # Sum volumes of the three-dimensional shapes in a config
  solid-shapes volume config/shapes.yaml

  # Canonical example (square, circle, rectangle, cube)
  solid-shapes demo

  # List shape kinds usable in configs
  solid-shapes kinds
"""
    )

    parser.add_argument(
        "--log-level",
        choices=sorted(VALID_LOG_LEVELS),
        default=None,
        help="Override the config log level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    sum_cmd = subparsers.add_parser('sum', help='Print summed area of configured shapes')
    sum_cmd.add_argument('config', help='Path to shapes config YAML')

    volume_cmd = subparsers.add_parser(
        'volume', help='Print summed volume of configured 3D shapes'
    )
    volume_cmd.add_argument('config', help='Path to shapes config YAML')

    subparsers.add_parser('demo', help='Print summed area of the example shapes')
    subparsers.add_parser('kinds', help='List registered shape kinds')

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = create_logger("cli", level=_resolve_level(args.log_level, None))
    registry = default_registry()

    try:
        config = None
        if args.command in ('sum', 'volume'):
            config = CalculatorConfig.from_yaml(args.config)
            logger.set_level(_resolve_level(args.log_level, config))
            logger.info(
                event=LogEvent.CONFIG_LOADED,
                message=f"Loaded {args.config}",
                metadata={'shape_count': len(config.shapes)},
            )

        logger.info(event=LogEvent.CLI_COMMAND, message=f"Running {args.command}")

        if args.command == 'kinds':
            for kind, description in sorted(registry.get_help().items()):
                print(f"{kind:<10} {description}")
            return 0

        if args.command == 'demo':
            shapes = demo_shapes()
        else:
            shapes = build_shapes(config, registry, logger)

        if args.command == 'volume':
            print(f"{{\n    volume: {sum_volumes(shapes)}\n}}")
            return 0

        calculator_logger = create_logger(
            "calculator", level=_resolve_level(args.log_level, config)
        )
        printer = Printer(ShapeAreaCalculator(logger=calculator_logger), logger=logger)
        print(printer.get_sum_as_json(*shapes))
        return 0

    except ShapeNotAvailableError as e:
        logger.error(event=LogEvent.UNKNOWN_SHAPE_ERROR, message=str(e), exc_info=e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except InvalidStateError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError, TypeError) as e:
        logger.error(event=LogEvent.CONFIG_ERROR, message=str(e), exc_info=e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
