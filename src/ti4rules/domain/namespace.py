"""Namespaced object ids.

Every rule-relevant table object carries an id of the form
``type:source/name``, for instance ``card.action:base/morale_boost.1`` or
``unit:base/fighter``. The type may be dotted to express sub-kinds
(``card.technology.unit_upgrade``); classification only ever needs the
string itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import ObjectType
from .errors import ParseError


@dataclass(frozen=True, slots=True)
class NamespacedId:
    """Parsed form of a namespaced object id."""

    type: str
    source: str
    name: str

    def __str__(self) -> str:
        return format_nsid(self.type, self.source, self.name)

    def is_type(self, type_: str) -> bool:
        return self.type == type_ or self.type.startswith(f"{type_}.")


def format_nsid(type_: str, source: str, name: str) -> str:
    """Build ``type:source/name``."""

    return f"{type_}:{source}/{name}"


def parse(nsid: str) -> NamespacedId:
    """Split an id into its parts.

    Raises:
        ParseError: If a separator is missing or any part is empty.
    """
    type_, sep, rest = nsid.partition(":")
    if not sep:
        raise ParseError(f"Invalid namespace id: {nsid!r} (missing ':')")
    source, sep, name = rest.partition("/")
    if not sep:
        raise ParseError(f"Invalid namespace id: {nsid!r} (missing '/')")
    if not type_ or not source or not name:
        raise ParseError(f"Invalid namespace id: {nsid!r} (empty part)")
    return NamespacedId(type=type_, source=source, name=name)


def try_parse(nsid: str | None) -> NamespacedId | None:
    """Parse ``nsid`` or return ``None`` when it is absent or malformed."""

    if not nsid:
        return None
    try:
        return parse(nsid)
    except ParseError:
        return None


def matches_type(nsid: str, type_: str) -> bool:
    """Return True when ``nsid`` is of ``type_`` or one of its dotted sub-types."""

    parsed = try_parse(nsid)
    return parsed is not None and parsed.is_type(type_)


def parse_unit(nsid: str) -> str | None:
    """Return the unit name of a ``unit:`` id, ``None`` for anything else."""

    parsed = try_parse(nsid)
    if parsed is None or parsed.type != ObjectType.UNIT:
        return None
    return parsed.name
