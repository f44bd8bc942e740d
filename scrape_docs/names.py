"""Map native symbol names onto the names used by the generated bindings."""

from __future__ import annotations

import enum
from typing import Mapping

from .models import DEFAULT_STRIP_PREFIX

__all__ = [
    "EntityKind",
    "resolve_name",
    "resolve_type_name",
    "resolve_enum_member_name",
    "resolve_function_name",
]


class EntityKind(enum.Enum):
    """Doxygen entity kinds understood by the extractors."""

    STRUCT = "struct"
    UNION = "union"
    FUNCTION = "function"
    ENUM = "enum"
    TYPEDEF = "typedef"
    ENUM_MEMBER = "enumvalue"

    @property
    def is_type(self) -> bool:
        return self in _TYPE_KINDS


_TYPE_KINDS = frozenset({EntityKind.STRUCT, EntityKind.UNION, EntityKind.ENUM, EntityKind.TYPEDEF})


def resolve_type_name(
    name: str,
    rules: Mapping[str, str],
    prefix: str = DEFAULT_STRIP_PREFIX,
) -> str:
    """Resolve a struct, union, enum or typedef name.

    An explicit remap rule wins. Otherwise a leading ``prefix`` followed by an
    uppercase letter is dropped (``aiScene`` -> ``Scene``); ``aim`` or a bare
    ``ai`` stay as they are.
    """

    remapped = rules.get(name)
    if remapped is not None:
        return remapped
    if name.startswith(prefix) and len(name) > len(prefix) and name[len(prefix)].isupper():
        return name[len(prefix):]
    return name


def resolve_enum_member_name(name: str, rules: Mapping[str, str]) -> str:
    return rules.get(name, name)


def resolve_function_name(name: str) -> str:
    # The bindings keep native entry-point names verbatim.
    return name


def resolve_name(
    kind: EntityKind,
    name: str,
    rules: Mapping[str, str],
    prefix: str = DEFAULT_STRIP_PREFIX,
) -> str:
    if kind is EntityKind.FUNCTION:
        return resolve_function_name(name)
    if kind is EntityKind.ENUM_MEMBER:
        return resolve_enum_member_name(name, rules)
    if kind.is_type:
        return resolve_type_name(name, rules, prefix)
    raise ValueError(f"Unsupported entity kind: {kind!r}")
