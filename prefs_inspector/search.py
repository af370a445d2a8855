"""Free-text filtering of snapshot entries."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Mapping

from .render import describe
from .values import DynamicValue, Entry, Kind


def _haystacks(entry: Entry) -> Iterator[str]:
    value = entry.value
    yield entry.key
    yield value.kind.label
    if value.kind is Kind.STRING:
        yield value.text
    elif value.kind is Kind.LIST:
        for item in value.items:
            yield describe(item)
    elif value.kind is Kind.MAP:
        for k, v in value.entries.items():
            yield k
            yield describe(v)
    else:
        yield describe(value)


def matches(entry: Entry, query: str) -> bool:
    """Case-insensitive substring match against key, kind label and content.

    A blank query matches every entry.
    """
    needle = (query or "").casefold()
    if not needle.strip():
        return True
    return any(needle in hay.casefold() for hay in _haystacks(entry))


def sorted_entries(snapshot: Mapping[str, DynamicValue]) -> List[Entry]:
    return [Entry(key, snapshot[key]) for key in sorted(snapshot)]


def filter_entries(entries: Iterable[Entry], query: str) -> List[Entry]:
    """Keep entries matching *query*, preserving their order."""
    return [e for e in entries if matches(e, query)]


__all__ = ["filter_entries", "matches", "sorted_entries"]
