"""Text rendering for list rows and the detail view."""

from __future__ import annotations

import json
from dataclasses import dataclass

from .values import DynamicValue, Kind


@dataclass(frozen=True)
class Detail:
    key: str
    type_label: str
    text: str


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def hex_groups(data: bytes) -> str:
    # 4-byte groups, e.g. deadbeef 0102
    return bytes(data).hex(" ", -4)


def format_binary(data: bytes) -> str:
    return "<" + hex_groups(data) + ">"


def describe(value: DynamicValue, *, nested: bool = False) -> str:
    """Compact recursive textual form of *value*.

    Top-level strings are returned verbatim; inside containers they are
    quoted so ``["a, b"]`` and ``["a", "b"]`` stay distinguishable.
    """
    kind = value.kind
    if kind is Kind.STRING:
        return _quote(value.text) if nested else value.text
    if kind is Kind.INTEGER:
        return str(value.number)
    if kind is Kind.BOOLEAN:
        return "true" if value.flag else "false"
    if kind is Kind.BINARY:
        return format_binary(value.data)
    if kind is Kind.LIST:
        return "[" + ", ".join(describe(item, nested=True) for item in value.items) + "]"
    if kind is Kind.MAP:
        parts = [f"{_quote(k)}: {describe(value.entries[k], nested=True)}" for k in sorted(value.entries)]
        return "{" + ", ".join(parts) + "}"
    return value.description


def single_line(text: str) -> str:
    return " ".join(text.splitlines()) if ("\n" in text or "\r" in text) else text


def summarize(value: DynamicValue) -> str:
    """One-line summary used by list rows."""
    kind = value.kind
    if kind is Kind.LIST:
        return f"[{len(value.items)} items]"
    if kind is Kind.MAP:
        return f"{{{len(value.entries)} pairs}}"
    if kind is Kind.BINARY:
        return f"Data({len(value.data)} bytes)"
    return single_line(describe(value))


def type_label(value: DynamicValue) -> str:
    if value.kind is Kind.OTHER and value.type_name:
        return f"{Kind.OTHER.label} ({value.type_name})"
    return value.kind.label


def _render_block(value: DynamicValue, indent: int) -> str:
    pad = "  " * (indent + 1)
    if value.kind is Kind.LIST:
        if not value.items:
            return "[]"
        lines = ["["]
        for i, item in enumerate(value.items):
            lines.append(f"{pad}{i}: {_render_block(item, indent + 1)}")
        lines.append("  " * indent + "]")
        return "\n".join(lines)
    if value.kind is Kind.MAP:
        if not value.entries:
            return "{}"
        lines = ["{"]
        for k in sorted(value.entries):
            lines.append(f"{pad}{_quote(k)}: {_render_block(value.entries[k], indent + 1)}")
        lines.append("  " * indent + "}")
        return "\n".join(lines)
    return describe(value, nested=indent > 0)


def render_detail(key: str, value: DynamicValue) -> Detail:
    """Key, type label and the full, unabridged rendering of *value*."""
    return Detail(key=key, type_label=type_label(value), text=_render_block(value, 0))


__all__ = ["Detail", "describe", "format_binary", "hex_groups", "render_detail", "single_line", "summarize", "type_label"]
