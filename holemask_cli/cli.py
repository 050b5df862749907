"""
holemask CLI - Main entry point.

Computes hole boundaries, overlay strips and click routing from a YAML
mask configuration.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

import supervision as sv

from holemask.config import MaskConfig
from holemask.errors import HoleMaskError, InvalidSizeArity, MalformedLength, UnsupportedShape
from holemask.geometry import HoleHitTester, compute_boundary
from holemask.layout import compute_overlay_regions
from holemask.logging import LogEvent, create_logger

logger = create_logger("cli")

_ERROR_EVENTS = {
    MalformedLength: LogEvent.MALFORMED_LENGTH,
    InvalidSizeArity: LogEvent.INVALID_SIZE_ARITY,
    UnsupportedShape: LogEvent.UNSUPPORTED_SHAPE,
}


def parse_container(value: str) -> Tuple[int, int]:
    """
    Parse a 'WIDTHxHEIGHT' container size.

    Raises:
        argparse.ArgumentTypeError: If the value is not two positive integers
    """
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid container size: {value!r}. Expected WIDTHxHEIGHT, e.g. 1280x720"
        )
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Container size must be positive, got {value!r}")
    return width, height


def configure_logging(level_name: str) -> None:
    """Apply one level to every holemask component logger."""
    level = getattr(logging, level_name.upper())
    for component in ("geometry", "config", "cli"):
        create_logger(component, level=level)


def boundary_command(config: MaskConfig) -> Dict[str, Any]:
    boundary = compute_boundary(config.hole)
    return {
        'shape': config.hole.shape.value,
        'anchor': config.hole.anchor.value,
        'css': boundary.to_css(),
        'boundary': boundary.to_dict(),
    }


def resolve_command(config: MaskConfig, container_wh: Tuple[int, int]) -> Dict[str, Any]:
    boundary = compute_boundary(config.hole)
    return {
        'shape': config.hole.shape.value,
        'container_wh': list(container_wh),
        'pixels': boundary.resolve(container_wh).to_dict(),
    }


def regions_command(config: MaskConfig, container_wh: Tuple[int, int]) -> Dict[str, Any]:
    regions = compute_overlay_regions(compute_boundary(config.hole), container_wh)
    return {
        'container_wh': list(container_wh),
        'regions': regions.to_dict(),
    }


def click_command(
    config: MaskConfig,
    container_wh: Tuple[int, int],
    x: float,
    y: float
) -> Dict[str, Any]:
    target = HoleHitTester.classify(config.hole, sv.Point(x=x, y=y), container_wh)
    logger.info(
        event=LogEvent.CLICK_CLASSIFIED,
        message=f"Click at ({x}, {y}) routed to {target.value}",
        metadata={'x': x, 'y': y, 'target': target.value}
    )
    return {'x': x, 'y': y, 'target': target.value}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="holemask-cli",
        description="holemask CLI - Compute overlay hole geometry and route clicks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Symbolic boundary (CSS calc() expressions)
  holemask-cli boundary config/holes/rectangle.yaml

  # Pixel boundary for a given container
  holemask-cli resolve config/holes/circle.yaml --container 1000x800

  # Opaque strips around a rectangle/square hole
  holemask-cli regions config/holes/square.yaml

  # Route a click
  holemask-cli click config/holes/circle.yaml 50 50
"""
    )

    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: from config, else INFO)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    boundary = subparsers.add_parser('boundary', help='Print the symbolic hole boundary')
    boundary.add_argument('config', help='Path to mask config YAML')

    for name, help_text in (
        ('resolve', 'Print the hole boundary in pixels'),
        ('regions', 'Print the four overlay strips in pixels'),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('config', help='Path to mask config YAML')
        sub.add_argument('--container', type=parse_container, help='Container size WIDTHxHEIGHT')

    click = subparsers.add_parser('click', help='Route a click to the hole or the overlay')
    click.add_argument('config', help='Path to mask config YAML')
    click.add_argument('x', type=float, help='Click x in container pixels')
    click.add_argument('y', type=float, help='Click y in container pixels')
    click.add_argument('--container', type=parse_container, help='Container size WIDTHxHEIGHT')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.log_level:
        configure_logging(args.log_level)

    try:
        config = MaskConfig.from_yaml(args.config)
        if not args.log_level:
            configure_logging(config.log_level)

        container_wh = getattr(args, 'container', None) or config.container_wh

        if args.command == 'boundary':
            result = boundary_command(config)
        elif args.command == 'resolve':
            result = resolve_command(config, container_wh)
        elif args.command == 'regions':
            result = regions_command(config, container_wh)
        else:
            result = click_command(config, container_wh, args.x, args.y)

    except HoleMaskError as e:
        logger.error(
            event=_ERROR_EVENTS.get(type(e), LogEvent.CONFIG_ERROR),
            message="Invalid hole geometry",
            metadata={'config': args.config},
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError, TypeError) as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Invalid mask config",
            metadata={'config': args.config},
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
