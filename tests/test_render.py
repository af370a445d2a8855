from __future__ import annotations

from prefs_inspector.classify import classify
from prefs_inspector.render import describe, render_detail, summarize
from prefs_inspector.values import VBinary, VBoolean, VInteger, VList, VMap, VOther, VString


def test_summaries_of_containers_and_binary() -> None:
    assert summarize(VList([VInteger(1), VInteger(2), VInteger(3)])) == "[3 items]"
    assert summarize(VList([])) == "[0 items]"
    assert summarize(VMap({"a": VString("x"), "b": VString("y")})) == "{2 pairs}"
    assert summarize(VBinary(b"\x00" * 16)) == "Data(16 bytes)"


def test_summaries_of_scalars_are_plain_text() -> None:
    assert summarize(VString("Iris")) == "Iris"
    assert summarize(VInteger(-7)) == "-7"
    assert summarize(VBoolean(True)) == "true"
    assert summarize(VOther("2.5", "float")) == "2.5"


def test_summary_stays_on_one_line() -> None:
    assert summarize(VString("first\nsecond")) == "first second"


def test_describe_quotes_strings_only_inside_containers() -> None:
    assert describe(VString("a, b")) == "a, b"
    assert describe(VList([VString("a, b"), VInteger(1)])) == '["a, b", 1]'
    assert describe(VMap({"b": VBoolean(False), "a": VString("x")})) == '{"a": "x", "b": false}'


def test_describe_binary_as_grouped_hex() -> None:
    assert describe(VBinary(bytes.fromhex("deadbeef0102"))) == "<deadbeef 0102>"
    assert describe(VBinary(b"")) == "<>"


def test_detail_has_key_type_and_full_text() -> None:
    detail = render_detail("name", VString("Iris"))
    assert detail.key == "name"
    assert detail.type_label == "String"
    assert detail.text == "Iris"


def test_detail_labels_other_with_host_type() -> None:
    detail = render_detail("ratio", classify(0.5))
    assert detail.type_label == "Other (float)"
    assert detail.text == "0.5"


def test_detail_renders_nested_containers_unabridged() -> None:
    value = classify({"recent": ["a.txt", "b.txt"], "size": {"w": 800}})
    text = render_detail("window", value).text
    assert text.splitlines() == [
        "{",
        '  "recent": [',
        '    0: "a.txt"',
        '    1: "b.txt"',
        "  ]",
        '  "size": {',
        '    "w": 800',
        "  }",
        "}",
    ]


def test_detail_of_empty_containers() -> None:
    assert render_detail("l", VList([])).text == "[]"
    assert render_detail("m", VMap({})).text == "{}"
