"""Boundary between raw store values and :mod:`prefs_inspector.values`."""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from typing import Any

from .values import (
    DynamicValue,
    Kind,
    VBinary,
    VBoolean,
    VInteger,
    VList,
    VMap,
    VOther,
    VString,
)


def _describe_raw(raw: Any) -> str:
    try:
        return str(raw)
    except Exception:
        return f"<{type(raw).__name__} object>"


def classify(raw: Any) -> DynamicValue:
    """Map an untyped store value onto exactly one value kind.

    Precedence (first match wins): bytes, non-string sequence, mapping,
    string, integer, boolean, anything else. ``bool`` is an ``int`` subclass
    in Python, so booleans are recognised before the integer test; floats are
    never integers, even when integral. Never raises.
    """
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return VBinary(bytes(raw))
    if isinstance(raw, Sequence) and not isinstance(raw, str):
        return VList([classify(item) for item in raw])
    if isinstance(raw, Mapping):
        return VMap({str(k): classify(v) for k, v in raw.items()})
    if isinstance(raw, str):
        return VString(raw)
    if isinstance(raw, bool):
        return VBoolean(raw)
    if isinstance(raw, numbers.Integral):
        return VInteger(int(raw))
    return VOther(description=_describe_raw(raw), type_name=type(raw).__name__, raw=raw)


def to_raw(value: DynamicValue) -> Any:
    """Lower a value back into the store's raw representation."""
    kind = value.kind
    if kind is Kind.STRING:
        return value.text
    if kind is Kind.INTEGER:
        return value.number
    if kind is Kind.BOOLEAN:
        return value.flag
    if kind is Kind.LIST:
        return [to_raw(item) for item in value.items]
    if kind is Kind.MAP:
        return {k: to_raw(v) for k, v in value.entries.items()}
    if kind is Kind.BINARY:
        return bytes(value.data)
    return value.raw


__all__ = ["classify", "to_raw"]
