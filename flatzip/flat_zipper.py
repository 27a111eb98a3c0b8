"""Collect matching files from a directory tree into one flat ZIP archive.

Directory structure is discarded. Files that end up with the same name are
compared byte for byte: identical copies are archived once, different files
get numeric suffixes (``photo.jpg``, ``photo_2.jpg``, ...).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from flatzip.errors import FlatZipError
from flatzip.load_config import load_config
from flatzip.run_flatten import run_flatten


def configure_logging(args: argparse.Namespace, config: dict[str, Any]) -> None:
    """Set up console logging from the verbosity flags or the config file."""
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = getattr(logging, config["logging"]["level"].upper())
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    ap = argparse.ArgumentParser(
        description="Zip every file matching a pattern into one flat archive.",
    )
    ap.add_argument(
        "-o",
        "--output",
        required=True,
        type=Path,
        help="Output zip file",
    )
    ap.add_argument(
        "-r",
        "--regex",
        required=True,
        help="Regular expression to check whether a file should be included",
    )
    ap.add_argument(
        "-p",
        "--path",
        default=Path(),
        type=Path,
        help="Root folder for searching (default: current directory)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace the output file if it already exists",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve names and report, but do not write the archive",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON report of queued, renamed and duplicate files",
    )
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug details"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log warnings and errors"
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the flattening process."""
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
        configure_logging(args, config)
        return run_flatten(args, config)
    except FlatZipError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
