"""Reduce Doxygen description markup to plain text.

Doxygen stores descriptions as mixed-content XML: prose interleaved with
``<para>``, ``<ref>``, ``<itemizedlist>``, ``<simplesect>`` and friends. The
reducer walks that tree depth-first and keeps just enough structure (line
breaks, ``Note:``/``See:`` prefixes, list bullets) to stay readable.
"""

from __future__ import annotations

import re

from lxml import etree

__all__ = ["reduce_markup", "clean_text", "combine_descriptions", "flatten_text"]

# Elements whose content is taken verbatim, without markers.
INLINE_TAGS = frozenset({"ref", "computeroutput", "emphasis", "bold"})
LIST_TAGS = frozenset({"itemizedlist", "orderedlist"})
# Extracted separately into ApiDetails.parameters / return_value.
SUPPRESSED_SECTIONS = frozenset({"return", "param"})
SECTION_PREFIXES = {"note": "\nNote: ", "see": "\nSee: "}

_HORIZONTAL_SPACE = re.compile(r"[ \t]+")


def reduce_markup(element: etree._Element | None) -> str:
    """Return the cleaned plain-text rendering of ``element``'s content."""

    if element is None:
        return ""
    parts: list[str] = []
    _reduce_children(element, parts)
    return clean_text("".join(parts))


def flatten_text(element: etree._Element | None) -> str:
    """Concatenate every text node below ``element``, ignoring markup."""

    if element is None:
        return ""
    parts = [element.text or ""]
    for child in element:
        if isinstance(child.tag, str):
            parts.append(flatten_text(child))
        parts.append(child.tail or "")
    return "".join(parts)


def clean_text(text: str) -> str:
    text = _HORIZONTAL_SPACE.sub(" ", text)
    text = text.replace("\n ", "\n")
    return text.strip()


def combine_descriptions(brief: str | None, detailed: str | None) -> str:
    """Merge a brief and detailed description without repeating the brief."""

    brief_blank = not brief or not brief.strip()
    detailed_blank = not detailed or not detailed.strip()
    if brief_blank and detailed_blank:
        return ""
    if brief_blank:
        return detailed or ""
    if detailed_blank:
        return brief
    if detailed.lower().startswith(brief.lower()):
        return detailed
    return f"{brief} {detailed}"


def _reduce_children(element: etree._Element, parts: list[str]) -> None:
    if element.text:
        parts.append(element.text)
    for child in element:
        if isinstance(child.tag, str):
            _reduce_element(child, parts)
        if child.tail:
            parts.append(child.tail)


def _reduce_element(child: etree._Element, parts: list[str]) -> None:
    tag = etree.QName(child).localname

    if tag == "para":
        _reduce_children(child, parts)
        parts.append(" ")
    elif tag in INLINE_TAGS:
        parts.append(flatten_text(child))
    elif tag in LIST_TAGS:
        for item in child.iterchildren("listitem"):
            parts.append("\n- ")
            _reduce_children(item, parts)
    elif tag == "simplesect":
        kind = child.get("kind")
        if kind in SUPPRESSED_SECTIONS:
            return
        parts.append(SECTION_PREFIXES.get(kind, ""))
        _reduce_children(child, parts)
    elif tag == "parameterlist":
        return
    else:
        _reduce_children(child, parts)
