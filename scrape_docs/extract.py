"""Extract documentation records from Doxygen compound XML files.

Each ``compounddef`` is routed by kind: struct/union compounds are documented
directly, file/namespace compounds are scanned for function, enum and typedef
members. Every extractor resolves the public symbol name, then mutates the
matching :class:`~scrape_docs.models.ApiDetails` record in the result table.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Mapping

from lxml import etree

from .markup import combine_descriptions, flatten_text, reduce_markup
from .models import ApiDetails, ResultTable, ScrapeSettings
from .names import EntityKind, resolve_name

__all__ = [
    "extract_struct",
    "extract_function",
    "extract_enum",
    "extract_typedef",
    "process_compound",
    "process_xml_file",
]

LOGGER = logging.getLogger(__name__)

RECORD_COMPOUND_KINDS = frozenset({"struct", "union"})
CONTAINER_COMPOUND_KINDS = frozenset({"file", "namespace"})

Extractor = Callable[[etree._Element, ResultTable, Mapping[str, str], ScrapeSettings], None]


def _child_text(element: etree._Element, tag: str) -> str:
    return flatten_text(element.find(tag))


def _document(
    element: etree._Element,
    kind: EntityKind,
    name: str,
    table: ResultTable,
    rules: Mapping[str, str],
    settings: ScrapeSettings,
) -> ApiDetails:
    """Fetch the record for ``name`` and apply the element's brief/detailed text."""

    resolved = resolve_name(kind, name, rules, settings.strip_prefix)
    details = table.get_or_create(resolved)
    details.set_summary(
        reduce_markup(element.find("briefdescription")),
        reduce_markup(element.find("detaileddescription")),
    )
    return details


def _combined_description(element: etree._Element) -> str:
    return combine_descriptions(
        reduce_markup(element.find("briefdescription")),
        reduce_markup(element.find("detaileddescription")),
    )


def extract_struct(
    compounddef: etree._Element,
    table: ResultTable,
    rules: Mapping[str, str],
    settings: ScrapeSettings,
) -> None:
    name = _child_text(compounddef, "compoundname")
    if not name:
        return
    kind = EntityKind.UNION if compounddef.get("kind") == "union" else EntityKind.STRUCT
    details = _document(compounddef, kind, name, table, rules, settings)

    for memberdef in compounddef.iter("memberdef"):
        if memberdef.get("kind") != "variable":
            continue
        field_name = _child_text(memberdef, "name")
        if not field_name:
            continue
        text = _combined_description(memberdef)
        if text.strip():
            details.fields[field_name] = text

    details.help_link = settings.help_link


def extract_function(
    memberdef: etree._Element,
    table: ResultTable,
    rules: Mapping[str, str],
    settings: ScrapeSettings,
) -> None:
    details = _document(memberdef, EntityKind.FUNCTION, _child_text(memberdef, "name"), table, rules, settings)
    detailed = memberdef.find("detaileddescription")

    if detailed is not None:
        params = next(
            (pl for pl in detailed.iter("parameterlist") if pl.get("kind") == "param"),
            None,
        )
        if params is not None:
            for item in params.iterchildren("parameteritem"):
                param_name = flatten_text(item.find("parameternamelist/parametername"))
                param_text = reduce_markup(item.find("parameterdescription"))
                if param_name and param_text.strip():
                    details.parameters[param_name] = param_text

        returns = next(
            (sect for sect in detailed.iter("simplesect") if sect.get("kind") == "return"),
            None,
        )
        if returns is not None:
            return_text = reduce_markup(returns)
            if return_text.strip():
                details.return_value = return_text

    details.help_link = settings.help_link


def extract_enum(
    memberdef: etree._Element,
    table: ResultTable,
    rules: Mapping[str, str],
    settings: ScrapeSettings,
) -> None:
    details = _document(memberdef, EntityKind.ENUM, _child_text(memberdef, "name"), table, rules, settings)

    for enumvalue in memberdef.iterchildren("enumvalue"):
        value_name = _child_text(enumvalue, "name")
        if not value_name:
            continue
        resolved = resolve_name(EntityKind.ENUM_MEMBER, value_name, rules, settings.strip_prefix)
        text = _combined_description(enumvalue)
        if text.strip():
            details.fields[resolved] = text

    details.help_link = settings.help_link


def extract_typedef(
    memberdef: etree._Element,
    table: ResultTable,
    rules: Mapping[str, str],
    settings: ScrapeSettings,
) -> None:
    details = _document(memberdef, EntityKind.TYPEDEF, _child_text(memberdef, "name"), table, rules, settings)
    details.help_link = settings.help_link


MEMBER_EXTRACTORS: dict[str, Extractor] = {
    EntityKind.FUNCTION.value: extract_function,
    EntityKind.ENUM.value: extract_enum,
    EntityKind.TYPEDEF.value: extract_typedef,
}


def process_compound(
    compounddef: etree._Element,
    table: ResultTable,
    rules: Mapping[str, str],
    settings: ScrapeSettings,
) -> None:
    """Dispatch one ``compounddef`` (and its members) to the extractors."""

    kind = compounddef.get("kind")
    if not _child_text(compounddef, "compoundname"):
        return

    if kind in RECORD_COMPOUND_KINDS:
        extract_struct(compounddef, table, rules, settings)
    elif kind in CONTAINER_COMPOUND_KINDS:
        for memberdef in compounddef.iter("memberdef"):
            extractor = MEMBER_EXTRACTORS.get(memberdef.get("kind", ""))
            if extractor is None or not _child_text(memberdef, "name"):
                continue
            extractor(memberdef, table, rules, settings)
    else:
        LOGGER.debug("Ignoring compound kind=%s", kind)


def process_xml_file(
    path: str | Path,
    table: ResultTable,
    rules: Mapping[str, str],
    settings: ScrapeSettings | None = None,
) -> int:
    """Scrape one Doxygen XML file into ``table``.

    Contributions are collected in a scratch table and merged only once the
    whole file has been processed, so a file that fails halfway leaves
    ``table`` untouched. Returns the number of records the file touched.
    """

    settings = settings or ScrapeSettings()
    parser = etree.XMLParser(
        remove_comments=True,
        remove_pis=True,
        resolve_entities=False,
        huge_tree=True,
    )
    tree = etree.parse(str(path), parser)

    staged = ResultTable()
    for compounddef in tree.getroot().iter("compounddef"):
        process_compound(compounddef, staged, rules, settings)

    table.merge(staged)
    LOGGER.debug("%s contributed %d records", Path(path).name, len(staged))
    return len(staged)
