"""Listing of container entries for debugging."""

from dataclasses import dataclass
from typing import Any

from .container import Container
from .definitions import ProtectedDefinition, SharedDefinition


@dataclass
class EntryInfo:
    """One row of a container listing.

    Attributes:
        key: Entry identifier
        kind: parameter, service, shared or protected
        value: Resolved value, or the raw stored value when not resolving
    """
    key: str
    kind: str
    value: Any


def entry_kind(stored: Any) -> str:
    """Classify a raw stored value."""
    if isinstance(stored, SharedDefinition):
        return "shared"
    if isinstance(stored, ProtectedDefinition):
        return "protected"
    if callable(stored):
        return "service"
    return "parameter"


def describe(container: Container, resolve: bool = True) -> list[EntryInfo]:
    """List every entry of a container.

    Resolving calls ``container.get`` for each entry, which runs service
    factories and memoizes shared ones. Factory errors propagate.

    Args:
        container: Container to list
        resolve: Report resolved values instead of raw stored values
    """
    rows = []
    for key in container.keys():
        stored = container.raw(key)
        value = container.get(key) if resolve else stored
        rows.append(EntryInfo(key=key, kind=entry_kind(stored), value=value))
    return rows


def format_entries(entries: list[EntryInfo]) -> str:
    """Render a listing as an aligned text table."""
    if not entries:
        return "(no entries)"
    key_width = max(len(str(e.key)) for e in entries)
    kind_width = max(len(e.kind) for e in entries)
    return "\n".join(
        f"{str(e.key).ljust(key_width)}  {e.kind.ljust(kind_width)}  {e.value!r}"
        for e in entries
    )
