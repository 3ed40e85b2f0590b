#!/usr/bin/env python
"""Rank every pair of vectors in an input file by the angle between them.

Usage:
    python -m scripts.theta_report data/vectors.txt --precision 4

Reads one vector per line (whitespace-separated numbers), prints
``θ(<a>, <b>) = <angle>`` for every pair in ascending angle order and
exits non-zero on any input or dimension error. Nothing is printed when
the computation fails.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError

from vecangle.angles.report import format_report, report_to_dict
from vecangle.angles.sorting import theta_sort
from vecangle.config import NanPosition, Settings, get_settings
from vecangle.exceptions import ConfigurationError, VecAngleError
from vecangle.logging_config import get_logger, setup_logging
from vecangle.vectors.loader import StreamVectorLoader, TextFileVectorLoader
from vecangle.vectors.models import Vector, VectorPair

logger = get_logger(__name__)

STDIN_MARKER = "-"


def load_dataset(source: str) -> list[Vector]:
    """Load vectors from a file path, or from stdin when source is ``-``."""
    if source == STDIN_MARKER:
        logger.info("Reading vectors from stdin")
        return StreamVectorLoader(sys.stdin).load("<stdin>")
    logger.info(f"Reading vectors from {source}")
    return TextFileVectorLoader().load(source)


def run_report(
    source: str,
    precision: int,
    nan_position: NanPosition,
    output_path: Path | None = None,
) -> list[VectorPair]:
    """Load, rank and print the pairs of one dataset.

    Args:
        source: Input file path or ``-`` for stdin.
        precision: Digits after the decimal point in printed angles.
        nan_position: Placement of NaN angles.
        output_path: Optional path to save the ranking as JSON.

    Returns:
        The ranked pairs.

    Raises:
        VecAngleError: If loading or ranking fails.
    """
    vectors = load_dataset(source)
    logger.info(f"Ranking {len(vectors)} vectors")
    pairs = theta_sort(vectors, nan_position=nan_position)

    sys.stdout.write(format_report(pairs, precision))

    if output_path:
        output_path.write_text(json.dumps(report_to_dict(pairs), indent=2))
        logger.info(f"Results saved to {output_path}")

    return pairs


def load_settings() -> Settings:
    """Load settings, reporting invalid values as a ConfigurationError.

    Raises:
        ConfigurationError: If an environment value fails validation.
    """
    try:
        return get_settings()
    except ValidationError as e:
        fields = sorted(
            {".".join(str(part) for part in err["loc"]) for err in e.errors()}
        )
        raise ConfigurationError(
            f"Invalid configuration for: {', '.join(fields)}",
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the command-line parser, with defaults taken from settings."""
    parser = argparse.ArgumentParser(
        description="Rank vector pairs by the angle between them",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=settings.default_input,
        help="Input file with one vector per line, or - for stdin",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=settings.precision,
        help="Digits after the decimal point in printed angles",
    )
    parser.add_argument(
        "--nan-position",
        choices=[p.value for p in NanPosition],
        default=settings.nan_position.value,
        help="Place pairs with an undefined angle first or last",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Path to save the ranking as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level override",
    )
    return parser


def fail(error: VecAngleError) -> NoReturn:
    """Log a fatal error and exit with status 1."""
    logger.error(
        f"{error.message} [{error.code.value}]",
        extra={"error_code": error.code.value, "details": error.details},
    )
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        setup_logging(level="INFO", json_output=False)
        fail(e)

    parser = build_parser(settings)
    args = parser.parse_args(argv)
    if args.precision < 0:
        parser.error("--precision must be non-negative")

    setup_logging(level=args.log_level)

    try:
        run_report(
            source=args.input,
            precision=args.precision,
            nan_position=NanPosition(args.nan_position),
            output_path=args.output,
        )
    except VecAngleError as e:
        fail(e)

    sys.exit(0)


if __name__ == "__main__":
    main()
