from __future__ import annotations

import plistlib
import tkinter as tk
from pathlib import Path

import pytest

from prefs_inspector.settings import SettingsStore


def _make_app(tmp_path: Path):
    from prefs_inspector.gui.app import PrefsInspectorGUI

    domain = tmp_path / "com.example.app.plist"
    domain.write_bytes(plistlib.dumps({"volume": 7, "name": "Iris", "flags": [True, False]}))
    try:
        app = PrefsInspectorGUI(str(domain), settings_store=SettingsStore(home=tmp_path / "home"))
    except tk.TclError as exc:
        pytest.skip(f"Tk not available in environment: {exc}")
    app.withdraw()
    return app, domain


def _row_values(app):
    tree = app.list_panel.tree
    return [tuple(tree.item(iid, "values")) for iid in tree.get_children("")]


def test_list_renders_sorted_rows_and_filters(tmp_path: Path) -> None:
    app, _domain = _make_app(tmp_path)
    try:
        assert [v[0] for v in _row_values(app)] == ["flags", "name", "volume"]
        assert str(_row_values(app)[0][1]) == "[2 items]"

        app.var_query.set("vol")
        assert [v[0] for v in _row_values(app)] == ["volume"]
    finally:
        app.destroy()


def test_edit_string_and_save_writes_store(tmp_path: Path) -> None:
    app, domain = _make_app(tmp_path)
    try:
        app._on_select("name")
        assert app.detail_panel.key_var.get() == "name"
        assert app.detail_panel.type_var.get() == "String"

        app._on_toggle_edit()
        assert app.detail_panel.edit_label.get() == "Done"
        app.session.editor.set_text("Iris2")
        app._on_toggle_edit()

        assert plistlib.loads(domain.read_bytes())["name"] == "Iris2"
        assert app.detail_panel.edit_label.get() == "Edit"
        assert ("name", "Iris2") in [(v[0], str(v[1])) for v in _row_values(app)]
    finally:
        app.destroy()


def test_editor_widgets_build_for_containers(tmp_path: Path) -> None:
    app, _domain = _make_app(tmp_path)
    try:
        app._on_select("flags")
        app._on_toggle_edit()
        entries = [w for w in app.detail_panel.editor_host.winfo_children() if w.winfo_class() == "TEntry"]
        assert len(entries) == 2
        app._on_cancel_edit()
        assert app.detail_panel.editor_host.winfo_children() == []
    finally:
        app.destroy()


def test_reselecting_entry_reads_store_again(tmp_path: Path) -> None:
    app, domain = _make_app(tmp_path)
    try:
        app._on_select("name")
        domain.write_bytes(plistlib.dumps({"volume": 7, "name": "Changed", "flags": [True, False]}))

        app._on_select("name")
        assert app.session.value.text == "Changed"

        app._on_toggle_edit()
        app.session.editor.set_text("Draft")
        app._on_select("name")
        assert app.session.pending.text == "Draft"
    finally:
        app.destroy()
