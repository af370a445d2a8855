"""Kind-specific value editors.

Each ``edit_*`` function is pure: it takes the current value and the user's
input and returns the new value, or ``None`` when the input is rejected (which
is not an error; the previous value simply stays in place). The editor
classes hold the text the widgets display and forward every emitted value to
an ``on_emit`` callback. No editor ever changes a value's kind.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional, Type

from .render import describe, hex_groups
from .values import DynamicValue, Kind, VBinary, VBoolean, VInteger, VList, VMap, VString

BINARY_TEXT_ENCODINGS = ("hex", "utf-8")
DEFAULT_BINARY_TEXT_ENCODING = "hex"

UNSUPPORTED_MESSAGE = "Editing values of this type is not supported."

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

EmitCallback = Callable[[DynamicValue], None]


def edit_string(current: VString, text: str) -> VString:
    return VString(text)


def edit_integer(current: VInteger, text: str) -> Optional[VInteger]:
    if not _INTEGER_RE.fullmatch(text or ""):
        return None
    try:
        return VInteger(int(text))
    except ValueError:
        # beyond the interpreter's int string conversion limit
        return None


def edit_boolean(current: VBoolean, flag: Optional[bool] = None) -> VBoolean:
    """Toggle *current*, or set it explicitly when *flag* is given."""
    return VBoolean((not current.flag) if flag is None else bool(flag))


def binary_to_text(value: VBinary, encoding: str = DEFAULT_BINARY_TEXT_ENCODING) -> str:
    if encoding == "hex":
        return hex_groups(value.data)
    return value.data.decode("utf-8", errors="replace")


def edit_binary(current: VBinary, text: str, encoding: str = DEFAULT_BINARY_TEXT_ENCODING) -> Optional[VBinary]:
    """Convert editor text into bytes.

    ``hex`` accepts hex digits with arbitrary whitespace (an optional ``<...>``
    wrapper is tolerated) and rejects anything else. ``utf-8`` accepts any
    text; it cannot reproduce bytes that are not valid UTF-8.
    """
    if encoding not in BINARY_TEXT_ENCODINGS:
        raise ValueError(f"Unknown binary text encoding: {encoding!r}")
    if encoding == "utf-8":
        return VBinary(text.encode("utf-8", errors="replace"))
    cleaned = (text or "").strip()
    if cleaned.startswith("<") and cleaned.endswith(">"):
        cleaned = cleaned[1:-1]
    try:
        return VBinary(bytes.fromhex(cleaned))
    except ValueError:
        return None


class ValueEditor:
    """Holds the last emitted value of one detail view edit."""

    editable = True

    def __init__(self, value: DynamicValue, on_emit: Optional[EmitCallback] = None):
        self.value = value
        self.emitted = False
        self._on_emit = on_emit

    def _emit(self, new_value: DynamicValue) -> DynamicValue:
        self.value = new_value
        self.emitted = True
        if self._on_emit is not None:
            self._on_emit(new_value)
        return new_value


class StringEditor(ValueEditor):
    def __init__(self, value: VString, on_emit: Optional[EmitCallback] = None):
        super().__init__(value, on_emit)
        self.text = value.text

    def set_text(self, text: str) -> Optional[DynamicValue]:
        self.text = text
        return self._emit(edit_string(self.value, text))


class IntegerEditor(ValueEditor):
    def __init__(self, value: VInteger, on_emit: Optional[EmitCallback] = None):
        super().__init__(value, on_emit)
        self.text = str(value.number)

    def set_text(self, text: str) -> Optional[DynamicValue]:
        self.text = text
        new_value = edit_integer(self.value, text)
        if new_value is None:
            return None
        return self._emit(new_value)


class BooleanEditor(ValueEditor):
    def toggle(self) -> DynamicValue:
        return self._emit(edit_boolean(self.value))

    def set_flag(self, flag: bool) -> DynamicValue:
        return self._emit(edit_boolean(self.value, flag))


class BinaryEditor(ValueEditor):
    def __init__(
        self,
        value: VBinary,
        on_emit: Optional[EmitCallback] = None,
        *,
        encoding: str = DEFAULT_BINARY_TEXT_ENCODING,
    ):
        super().__init__(value, on_emit)
        self.encoding = encoding
        self.text = binary_to_text(value, encoding)

    def set_text(self, text: str) -> Optional[DynamicValue]:
        self.text = text
        new_value = edit_binary(self.value, text, self.encoding)
        if new_value is None:
            return None
        return self._emit(new_value)


class ListEditor(ValueEditor):
    """Per-element text fields; an edited element is stored as a string."""

    def __init__(self, value: VList, on_emit: Optional[EmitCallback] = None):
        super().__init__(value, on_emit)
        self.items: List[DynamicValue] = list(value.items)
        self.texts: List[str] = [describe(item) for item in self.items]

    def _emit_items(self) -> DynamicValue:
        return self._emit(VList(list(self.items)))

    def set_item(self, index: int, text: str) -> DynamicValue:
        self.texts[index] = text
        self.items[index] = VString(text)
        return self._emit_items()

    def add_item(self) -> DynamicValue:
        self.texts.append("")
        self.items.append(VString(""))
        return self._emit_items()

    def remove_item(self, index: int) -> DynamicValue:
        del self.texts[index]
        del self.items[index]
        return self._emit_items()


class MapEditor(ValueEditor):
    """Parallel key/value text fields.

    Pairs are kept in display order; when two pairs share a key the later one
    wins when the map is built.
    """

    def __init__(self, value: VMap, on_emit: Optional[EmitCallback] = None):
        super().__init__(value, on_emit)
        self.keys: List[str] = list(value.entries)
        self.values: List[DynamicValue] = [value.entries[k] for k in self.keys]
        self.value_texts: List[str] = [describe(v) for v in self.values]

    def build(self) -> VMap:
        entries: Dict[str, DynamicValue] = {}
        for key, val in zip(self.keys, self.values):
            entries[key] = val
        return VMap(entries)

    def duplicate_keys(self) -> List[str]:
        seen = set()
        dupes: List[str] = []
        for key in self.keys:
            if key in seen and key not in dupes:
                dupes.append(key)
            seen.add(key)
        return dupes

    def set_key(self, index: int, text: str) -> DynamicValue:
        self.keys[index] = text
        return self._emit(self.build())

    def set_value(self, index: int, text: str) -> DynamicValue:
        self.value_texts[index] = text
        self.values[index] = VString(text)
        return self._emit(self.build())

    def add_pair(self) -> DynamicValue:
        self.keys.append("")
        self.values.append(VString(""))
        self.value_texts.append("")
        return self._emit(self.build())

    def remove_pair(self, index: int) -> DynamicValue:
        del self.keys[index]
        del self.values[index]
        del self.value_texts[index]
        return self._emit(self.build())


class UnsupportedEditor(ValueEditor):
    editable = False
    message = UNSUPPORTED_MESSAGE


_EDITORS: Dict[Kind, Type[ValueEditor]] = {
    Kind.STRING: StringEditor,
    Kind.INTEGER: IntegerEditor,
    Kind.BOOLEAN: BooleanEditor,
    Kind.LIST: ListEditor,
    Kind.MAP: MapEditor,
    Kind.BINARY: BinaryEditor,
    Kind.OTHER: UnsupportedEditor,
}


def editor_for(
    value: DynamicValue,
    on_emit: Optional[EmitCallback] = None,
    *,
    binary_encoding: str = DEFAULT_BINARY_TEXT_ENCODING,
) -> ValueEditor:
    """Create the editor matching *value*'s kind."""
    if value.kind is Kind.BINARY:
        return BinaryEditor(value, on_emit, encoding=binary_encoding)
    return _EDITORS[value.kind](value, on_emit)


__all__ = [
    "BINARY_TEXT_ENCODINGS",
    "DEFAULT_BINARY_TEXT_ENCODING",
    "UNSUPPORTED_MESSAGE",
    "BinaryEditor",
    "BooleanEditor",
    "IntegerEditor",
    "ListEditor",
    "MapEditor",
    "StringEditor",
    "UnsupportedEditor",
    "ValueEditor",
    "binary_to_text",
    "edit_binary",
    "edit_boolean",
    "edit_integer",
    "edit_string",
    "editor_for",
]
