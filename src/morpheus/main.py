"""
Command-line Entry Point
========================
Runs the acceptance drivers and turns their outcome into an exit status.

Usage:
    $ python -m morpheus                 # run every driver
    $ python -m morpheus matrix --seed 7
    $ python -m morpheus norm -v
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from morpheus.config import LOG_LEVEL
from morpheus.drivers import DRIVERS, run_drivers
from morpheus.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="morpheus",
        description="Run the Morpheus vector and matrix acceptance checks.",
    )
    parser.add_argument(
        "driver",
        nargs="?",
        default="all",
        choices=[*DRIVERS, "all"],
        help="Which check to run (default: all).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random test data.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, run the selected drivers, and return the exit status."""
    args = build_parser().parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else LOG_LEVEL, log_file=args.log_file)

    names = list(DRIVERS) if args.driver == "all" else [args.driver]
    logger.info("Running drivers: %s", ", ".join(names))
    passed = run_drivers(names, seed=args.seed)
    return 0 if passed else 1
