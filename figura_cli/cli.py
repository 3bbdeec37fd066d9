"""
figura CLI - Main entry point.

Decodes one record and exits 0 when it is valid, 1 otherwise.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from figura_feature.config import FeatureConfig, VALID_BACKENDS, VALID_LOG_LEVELS
from figura_feature.runner import parse_kind, run, write_record


def load_config(config_path: Optional[str]) -> FeatureConfig:
    """
    Load configuration from YAML, or defaults when no path is given.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If YAML is invalid
    """
    if config_path is None:
        return FeatureConfig()
    return FeatureConfig.from_yaml(Path(config_path))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="figura",
        description="figura - Decode a binary shape record and render it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Decode features.dat with the no-op renderer
  figura decode

  # Decode a given file and draw it to a PNG
  figura decode shapes/triangle.dat --renderer raster --output triangle.png

  # Scripted source and printing renderer
  figura decode --test-mode

  # Write a record file
  figura encode triangle 0 0 1 0 0 1 -o triangle.dat
"""
    )

    parser.add_argument(
        "--config",
        help="YAML configuration file"
    )
    parser.add_argument(
        "--log-level",
        choices=sorted(VALID_LOG_LEVELS),
        help="Logging level (default: from config, INFO)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # decode command
    decode = subparsers.add_parser('decode', help='Decode one record and render it')
    decode.add_argument('input', nargs='?', help='Record file (default: features.dat)')
    decode.add_argument(
        '--renderer',
        choices=sorted(VALID_BACKENDS),
        help='Render backend (default: from config, null)'
    )
    decode.add_argument('--output', help='Image path for the raster renderer')
    decode.add_argument(
        '--test-mode',
        action='store_true',
        help='Use the scripted source and console renderer'
    )

    # encode command
    encode = subparsers.add_parser('encode', help='Write a single record file')
    encode.add_argument('kind', help='Kind name (circle, triangle, square) or integer tag')
    encode.add_argument('params', nargs='*', type=float, help='Parameter values')
    encode.add_argument('-o', '--output', default='features.dat', help='Output file')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)

        if args.command == 'decode':
            config = config.with_overrides(
                input_path=args.input,
                backend=args.renderer,
                output_path=args.output,
                test_mode=True if args.test_mode else None,
                log_level=args.log_level,
            )
            return run(config)

        elif args.command == 'encode':
            written = write_record(
                args.output,
                parse_kind(args.kind),
                args.params,
                layout=config.layout,
            )
            print(f"Wrote {written} bytes to {args.output}")
            return 0

    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 1


if __name__ == '__main__':
    sys.exit(main())
