"""Loader for ``--remap`` rules stored in response (.rsp) files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

__all__ = ["load_remap_rules", "parse_remap_lines"]

LOGGER = logging.getLogger(__name__)

REMAP_SECTION = "--remap"


def load_remap_rules(
    paths: Iterable[str | Path],
    rules: dict[str, str] | None = None,
) -> dict[str, str]:
    """Accumulate exact-match rename rules from every readable rule file.

    Missing or unreadable files are reported and skipped. Rules found later (in the same file
    or a subsequent one) replace earlier rules for the same name.
    """

    rules = {} if rules is None else rules
    for raw_path in paths:
        path = Path(raw_path)
        if not path.is_file():
            LOGGER.warning("RSP file not found: %s", path)
            continue

        LOGGER.info("Loading remap rules from %s", path.name)
        try:
            # utf-8-sig drops a leading byte-order mark; undecodable bytes become U+FFFD.
            text = path.read_text(encoding="utf-8-sig", errors="replace")
        except OSError as exc:
            LOGGER.warning("Failed to read RSP file %s: %s", path, exc)
            continue
        parse_remap_lines(text.splitlines(), rules)

    LOGGER.info("Loaded %d remap rules", len(rules))
    return rules


def parse_remap_lines(lines: Iterable[str], rules: dict[str, str]) -> dict[str, str]:
    in_remap = False
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        # Any other "--option" line switches to a section we do not read.
        if line.startswith("--"):
            in_remap = line == REMAP_SECTION
            continue

        if not in_remap:
            continue

        old, sep, new = line.partition("=")
        old = old.strip()
        if sep and old:
            rules[old] = new.strip()
    return rules
