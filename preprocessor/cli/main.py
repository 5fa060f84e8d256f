"""Main CLI entry point for the preprocessor."""

import argparse
import sys
from typing import Optional

from .commands import run_preprocess


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the preprocessor CLI."""
    parser = argparse.ArgumentParser(
        prog='preprocess',
        description='Expand {NAME} placeholders from (NAME = VALUE) declarations'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Run command
    run_parser = subparsers.add_parser('run', help='Preprocess a file')
    run_parser.add_argument(
        'input',
        type=str,
        nargs='?',
        help='Path to input file (prompted for when omitted)'
    )
    run_parser.add_argument(
        '--output', '-o',
        type=str,
        help='Path to output file (default: input path plus suffix)'
    )
    run_parser.add_argument(
        '--config',
        type=str,
        help='Path to YAML config file'
    )
    run_parser.add_argument(
        '--suffix',
        type=str,
        help='Suffix appended to the input name to derive the output name'
    )
    run_parser.add_argument(
        '--report',
        type=str,
        metavar='PATH',
        help='Write a JSON report of bindings and diagnostics'
    )
    run_parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    run_parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    run_parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    run_parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='info',
        help='Set log level'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'run':
        return run_preprocess(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
