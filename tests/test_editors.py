from __future__ import annotations

import pytest

from prefs_inspector.editors import (
    UNSUPPORTED_MESSAGE,
    BinaryEditor,
    BooleanEditor,
    IntegerEditor,
    ListEditor,
    MapEditor,
    StringEditor,
    UnsupportedEditor,
    edit_binary,
    edit_boolean,
    edit_integer,
    edit_string,
    editor_for,
)
from prefs_inspector.values import VBinary, VBoolean, VInteger, VList, VMap, VOther, VString


def test_string_editor_accepts_any_text() -> None:
    assert edit_string(VString("a"), "") == VString("")
    assert edit_string(VString("a"), "  spaced  ") == VString("  spaced  ")


@pytest.mark.parametrize("text", ["12a", "", "-", "4_2", " 42", "1.0"])
def test_integer_editor_rejects_non_integers(text: str) -> None:
    assert edit_integer(VInteger(1), text) is None


@pytest.mark.parametrize("text, expected", [("42", 42), ("-7", -7), ("+3", 3), ("007", 7)])
def test_integer_editor_parses_integers(text: str, expected: int) -> None:
    assert edit_integer(VInteger(1), text) == VInteger(expected)


def test_integer_editor_keeps_last_valid_value() -> None:
    emitted = []
    editor = IntegerEditor(VInteger(5), emitted.append)

    assert editor.set_text("12a") is None
    assert editor.value == VInteger(5)
    assert editor.emitted is False

    assert editor.set_text("42") == VInteger(42)
    assert editor.set_text("") is None
    assert editor.value == VInteger(42)
    assert editor.text == ""
    assert emitted == [VInteger(42)]


def test_boolean_editor_toggles_immediately() -> None:
    assert edit_boolean(VBoolean(False)) == VBoolean(True)
    assert edit_boolean(VBoolean(True), True) == VBoolean(True)

    emitted = []
    editor = BooleanEditor(VBoolean(True), emitted.append)
    editor.toggle()
    editor.toggle()
    assert emitted == [VBoolean(False), VBoolean(True)]


def test_string_editor_emits_on_every_change() -> None:
    emitted = []
    editor = StringEditor(VString("Iris"), emitted.append)
    editor.set_text("Iris2")
    editor.set_text("")
    assert emitted == [VString("Iris2"), VString("")]


def test_list_editor_stores_edited_elements_as_strings() -> None:
    emitted = []
    editor = ListEditor(VList([VInteger(1), VBoolean(True)]), emitted.append)
    assert editor.texts == ["1", "true"]

    editor.set_item(0, "10")
    assert editor.value == VList([VString("10"), VBoolean(True)])

    editor.add_item()
    assert editor.value == VList([VString("10"), VBoolean(True), VString("")])
    assert editor.texts == ["10", "true", ""]

    editor.remove_item(1)
    assert editor.value == VList([VString("10"), VString("")])
    assert len(emitted) == 3


def test_map_editor_edits_pairs_in_place() -> None:
    editor = MapEditor(VMap({"w": VInteger(800), "h": VInteger(600)}))
    assert editor.keys == ["w", "h"]
    assert editor.value_texts == ["800", "600"]

    editor.set_key(0, "width")
    assert editor.value == VMap({"width": VInteger(800), "h": VInteger(600)})

    editor.set_value(1, "tall")
    assert editor.value == VMap({"width": VInteger(800), "h": VString("tall")})

    editor.add_pair()
    assert editor.value.entries[""] == VString("")

    editor.remove_pair(2)
    assert "" not in editor.value.entries


def test_map_editor_duplicate_keys_last_pair_wins() -> None:
    editor = MapEditor(VMap({"a": VString("first"), "b": VString("second")}))
    editor.set_key(1, "a")
    assert editor.duplicate_keys() == ["a"]
    assert editor.value == VMap({"a": VString("second")})


def test_binary_hex_editor_is_lossless_and_rejects_bad_hex() -> None:
    data = bytes(range(250, 256)) + b"\x00"
    editor = BinaryEditor(VBinary(data))
    assert edit_binary(VBinary(b""), editor.text) == VBinary(data)

    assert editor.set_text("zz") is None
    assert editor.set_text("abc") is None
    assert editor.value == VBinary(data)
    assert editor.set_text("<dead beef>") == VBinary(b"\xde\xad\xbe\xef")


def test_binary_utf8_editor_accepts_freeform_text() -> None:
    editor = BinaryEditor(VBinary(b"hello"), encoding="utf-8")
    assert editor.text == "hello"
    assert editor.set_text("héllo") == VBinary("héllo".encode("utf-8"))


def test_unknown_binary_encoding_is_an_error() -> None:
    with pytest.raises(ValueError):
        edit_binary(VBinary(b""), "00", "base85")


def test_other_values_are_not_editable() -> None:
    editor = editor_for(VOther("0.5", "float", 0.5))
    assert isinstance(editor, UnsupportedEditor)
    assert editor.editable is False
    assert editor.message == UNSUPPORTED_MESSAGE
    assert editor.emitted is False


def test_editor_for_dispatches_on_kind() -> None:
    assert isinstance(editor_for(VString("")), StringEditor)
    assert isinstance(editor_for(VInteger(0)), IntegerEditor)
    assert isinstance(editor_for(VBoolean(False)), BooleanEditor)
    assert isinstance(editor_for(VList([])), ListEditor)
    assert isinstance(editor_for(VMap({})), MapEditor)
    binary = editor_for(VBinary(b"a"), binary_encoding="utf-8")
    assert isinstance(binary, BinaryEditor)
    assert binary.encoding == "utf-8"


def test_integer_editor_treats_overlong_digit_strings_as_rejected() -> None:
    text = "1" * 5000
    assert edit_integer(VInteger(1), text) is None

    editor = IntegerEditor(VInteger(1))
    assert editor.set_text(text) is None
    assert editor.value == VInteger(1)
    assert editor.emitted is False


def test_binary_editor_text_matches_detail_rendering() -> None:
    from prefs_inspector.render import describe

    value = VBinary(bytes.fromhex("deadbeef0102"))
    assert describe(value) == "<" + BinaryEditor(value).text + ">"
