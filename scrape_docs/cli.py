"""Command-line interface entry points for scrape_docs."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from pydantic import ValidationError

from .io import scrape_directory, write_api_table
from .models import DEFAULT_HELP_LINK, DEFAULT_STRIP_PREFIX, ScrapeSettings
from .remap import load_remap_rules

__all__ = ["main"]

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1


class _UsageParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else getattr(logging, args.log_level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format="%(levelname)s:%(name)s:%(message)s")

    try:
        settings = ScrapeSettings(help_link=args.help_link, strip_prefix=args.strip_prefix)
    except ValidationError as exc:
        parser.error(f"invalid settings: {exc.errors()[0]['msg']}")

    if not args.xml_directory.is_dir():
        print(f"Error: XML directory not found: {args.xml_directory}", file=sys.stderr)
        return EXIT_USAGE

    return _cmd_scrape(args, settings)


def _build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(
        prog="scrape-docs",
        description="Scrape Doxygen XML into a msgpack API documentation table.",
    )
    parser.add_argument("xml_directory", type=Path, help="Path to Doxygen XML output directory")
    parser.add_argument("output", type=Path, help="Path to output msgpack file")
    parser.add_argument(
        "rsp_files",
        nargs="+",
        type=Path,
        metavar="rsp_file",
        help="One or more .rsp files containing --remap rules",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        help="Set logging level (debug, info, warning, error, critical).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging.",
    )
    parser.add_argument(
        "--help-link",
        default=DEFAULT_HELP_LINK,
        help="Base documentation URL attached to every record.",
    )
    parser.add_argument(
        "--strip-prefix",
        default=DEFAULT_STRIP_PREFIX,
        help="Native type-name prefix removed when no remap rule applies.",
    )
    return parser


def _cmd_scrape(args: argparse.Namespace, settings: ScrapeSettings) -> int:
    LOGGER.debug("help_link=%s strip_prefix=%s", settings.help_link, settings.strip_prefix)
    rules = load_remap_rules(args.rsp_files)
    table = scrape_directory(args.xml_directory, rules, settings)

    print(f"Found documentation for {len(table)} APIs.")
    output = write_api_table(table, args.output)
    print(f"Written to {output}")
    return EXIT_OK
