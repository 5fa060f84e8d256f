"""Run command implementation."""

import logging
from argparse import Namespace
from pathlib import Path
from typing import Optional

from preprocessor.config import ConfigLoader, PreprocessorConfig
from preprocessor.exceptions import ConfigValidationError
from preprocessor.runner import preprocess_file, write_report


logger = logging.getLogger(__name__)


def configure_logging(args: Namespace) -> None:
    """Set up logging from --log-level, --debug, --quiet and --verbose."""
    level_name = 'warning' if args.log_level == 'warn' else args.log_level
    log_level = getattr(logging, level_name.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    elif args.verbose:
        log_level = logging.DEBUG

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def prompt_for_input() -> Optional[str]:
    """Ask the user for an input filename."""
    try:
        answer = input("Input file: ").strip()
    except EOFError:
        return None
    return answer or None


def load_config(args: Namespace) -> PreprocessorConfig:
    """Load the config file, if any, and apply command-line overrides."""
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        config = ConfigLoader().load(config_path)
    else:
        config = PreprocessorConfig()

    if args.suffix is not None:
        if not args.suffix:
            raise ValueError("--suffix must not be empty")
        config.output_suffix = args.suffix

    return config


def run_preprocess(args: Namespace) -> int:
    """
    Preprocess one input file.

    Per-line diagnostics do not affect the exit code. A missing input
    file exits 1 without producing output; invalid config exits 2.
    """
    configure_logging(args)

    try:
        input_name = args.input or prompt_for_input()
        if not input_name:
            logger.error("No input file given")
            return 1

        input_path = Path(input_name)
        if not input_path.is_file():
            logger.error(f"Input file not found: {input_path}")
            return 1

        try:
            config = load_config(args)
        except ConfigValidationError as e:
            for error in e.errors:
                logger.error(f"Validation error: {error.message}")
            return e.exit_code

        output_path = Path(args.output) if args.output else None
        report = preprocess_file(input_path, output_path, config)

        if args.report:
            write_report(report, Path(args.report))

        if report.diagnostics:
            logger.warning(
                f"{len(report.diagnostics)} problem(s) reported, "
                f"{report.lines_dropped} line(s) dropped"
            )
        logger.info(f"Preprocessing complete: wrote {report.lines_written} line(s) to {report.output_path}")
        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except UnicodeDecodeError as e:
        logger.error(f"Cannot read input file: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        return 2
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
