"""Input enumeration, the scrape loop and msgpack (de)serialization."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator, Mapping

import msgpack
from lxml import etree

from .extract import process_xml_file
from .models import ApiDetails, ResultTable, ScrapeSettings

__all__ = ["iter_xml_files", "scrape_directory", "write_api_table", "read_api_table"]

LOGGER = logging.getLogger(__name__)

# Doxygen bookkeeping files that never hold compound definitions.
SKIPPED_FILES = frozenset({"index.xml", "Doxyfile.xml", "combine.xslt"})

# Positional record layout expected by the Win32 docs reader:
# [help_link, description, remarks, parameters, fields, return_value]
RECORD_FIELDS = ("help_link", "description", "remarks", "parameters", "fields", "return_value")


def iter_xml_files(directory: str | Path) -> Iterator[Path]:
    root = Path(directory)
    if not root.is_dir():
        raise FileNotFoundError(f"XML directory not found: {root}")
    for path in sorted(root.iterdir()):
        if path.suffix.lower() != ".xml" or path.name in SKIPPED_FILES or not path.is_file():
            continue
        yield path


def scrape_directory(
    directory: str | Path,
    rules: Mapping[str, str],
    settings: ScrapeSettings | None = None,
    table: ResultTable | None = None,
) -> ResultTable:
    """Scrape every Doxygen XML file in ``directory`` into one result table.

    A file that cannot be parsed or processed is reported and skipped; the
    remaining files are still scraped.
    """

    settings = settings or ScrapeSettings()
    table = ResultTable() if table is None else table

    for path in iter_xml_files(directory):
        LOGGER.info("Processing %s", path.name)
        try:
            process_xml_file(path, table, rules, settings)
        except etree.XMLSyntaxError as exc:
            LOGGER.warning("Failed to parse %s: %s", path.name, exc)
        except Exception as exc:  # only this file's contributions are lost
            LOGGER.warning(
                "Failed to process %s: %s",
                path.name,
                exc,
                exc_info=LOGGER.isEnabledFor(logging.DEBUG),
            )

    return table


def _pack_record(details: ApiDetails) -> list[Any]:
    return [
        details.help_link,
        details.description,
        details.remarks,
        dict(sorted(details.parameters.items())),
        dict(sorted(details.fields.items())),
        details.return_value,
    ]


def write_api_table(table: ResultTable, path: str | Path) -> Path:
    """Serialize ``table`` to ``path`` as a msgpack map, keys in sorted order."""

    payload = {name: _pack_record(details) for name, details in table.items()}
    blob = msgpack.packb(payload, use_bin_type=True)

    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(blob)
    LOGGER.debug("Wrote %d records (%d bytes) to %s", len(payload), len(blob), output)
    return output


def read_api_table(path: str | Path) -> dict[str, ApiDetails]:
    raw = msgpack.unpackb(Path(path).read_bytes(), raw=False)
    if not isinstance(raw, dict):
        raise ValueError("API table must be a msgpack map of name -> record")

    records: dict[str, ApiDetails] = {}
    for name, record in raw.items():
        if not isinstance(record, (list, tuple)) or len(record) != len(RECORD_FIELDS):
            raise ValueError(f"Malformed record for {name!r}: expected {len(RECORD_FIELDS)} items")
        values = dict(zip(RECORD_FIELDS, record))
        values["parameters"] = values["parameters"] or {}
        values["fields"] = values["fields"] or {}
        records[name] = ApiDetails(**values)
    return records
