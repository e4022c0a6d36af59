"""Command-line entry point for the ``pgsql-extract`` command.

Reads a protocol-analyzer JSON export, extracts the records of one
dissector namespace, and writes them next to the input
(``capture.json`` -> ``capture.pgsql.json``) or to stdout with ``-o -``.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pgsql_extract import __version__
from pgsql_extract.api import extract_file
from pgsql_extract.config import ExtractConfig
from pgsql_extract.errors import ExtractError
from pgsql_extract.sink import derive_output_path, write_records

logger = logging.getLogger("pgsql_extract")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgsql-extract",
        description="Extract one dissector namespace from a JSON capture export.",
    )
    parser.add_argument("path", help="JSON export to read")
    parser.add_argument(
        "-o",
        "--output",
        help="output file, or '-' for stdout (default: <name>.<namespace><ext>)",
    )
    parser.add_argument(
        "-n", "--namespace", default="pgsql", help="dissector namespace to extract"
    )
    parser.add_argument(
        "--indent", type=int, default=4, help="JSON indentation (default: 4)"
    )
    parser.add_argument(
        "--no-strip-prefix",
        action="store_true",
        help="keep the '<namespace>.' prefix on field names",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(logging.DEBUG)
    elif args.quiet:
        setup_logging(logging.WARNING)
    else:
        setup_logging()

    try:
        config = ExtractConfig(
            namespace=args.namespace,
            strip_prefix=not args.no_strip_prefix,
            indent=args.indent,
            output_suffix=args.namespace,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        records = extract_file(args.path, config=config)
    except OSError as exc:
        logger.error("cannot read %s: %s", args.path, exc)
        return 1
    except ExtractError as exc:
        logger.error("%s", exc)
        return 1

    try:
        if args.output == "-":
            write_records(records, sys.stdout, indent=config.indent)
        else:
            destination = args.output or derive_output_path(
                args.path, config.output_suffix
            )
            write_records(records, destination, indent=config.indent)
    except ExtractError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
