"""Detail view with kind-specific edit widgets."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...editors import (
    BinaryEditor,
    BooleanEditor,
    IntegerEditor,
    ListEditor,
    MapEditor,
    StringEditor,
    ValueEditor,
)
from ..controller import DetailSession
from ..state import EditState
from ..widgets import StatusBadge


def build_panel(parent, app) -> ttk.LabelFrame:
    frame = ttk.LabelFrame(parent, text="Entry")
    frame.columnconfigure(1, weight=1)
    frame.rowconfigure(2, weight=1)

    key_var = tk.StringVar(master=frame, value="Select an entry to see its details.")
    type_var = tk.StringVar(master=frame, value="")
    ttk.Label(frame, text="Key:").grid(row=0, column=0, sticky="w", padx=(8, 4), pady=(8, 2))
    ttk.Label(frame, textvariable=key_var, font=("TkDefaultFont", 10, "bold")).grid(row=0, column=1, sticky="w", pady=(8, 2))
    ttk.Label(frame, text="Type:").grid(row=1, column=0, sticky="w", padx=(8, 4), pady=2)
    ttk.Label(frame, textvariable=type_var).grid(row=1, column=1, sticky="w", pady=2)

    text = tk.Text(frame, wrap="word", height=12, state="disabled")
    text.grid(row=2, column=0, columnspan=2, sticky="nsew", padx=8, pady=(6, 6))

    editor_host = ttk.Frame(frame)
    editor_host.grid(row=3, column=0, columnspan=2, sticky="ew", padx=8)
    editor_host.columnconfigure(0, weight=1)

    actions = ttk.Frame(frame)
    actions.grid(row=4, column=0, columnspan=2, sticky="ew", padx=8, pady=(6, 8))
    edit_label = tk.StringVar(master=frame, value="Edit")
    btn_edit = ttk.Button(actions, textvariable=edit_label, command=app._on_toggle_edit, state="disabled")
    btn_edit.pack(side=tk.LEFT)
    btn_cancel = ttk.Button(actions, text="Cancel", command=app._on_cancel_edit, state="disabled")
    btn_cancel.pack(side=tk.LEFT, padx=(8, 0))
    badge = StatusBadge(actions)
    badge.pack(side=tk.RIGHT)

    frame.key_var = key_var  # type: ignore[attr-defined]
    frame.type_var = type_var  # type: ignore[attr-defined]
    frame.text = text  # type: ignore[attr-defined]
    frame.editor_host = editor_host  # type: ignore[attr-defined]
    frame.edit_label = edit_label  # type: ignore[attr-defined]
    frame.btn_edit = btn_edit  # type: ignore[attr-defined]
    frame.btn_cancel = btn_cancel  # type: ignore[attr-defined]
    frame.badge = badge  # type: ignore[attr-defined]
    return frame


def _set_text(widget: tk.Text, content: str) -> None:
    widget.configure(state="normal")
    widget.delete("1.0", tk.END)
    widget.insert("1.0", content)
    widget.configure(state="disabled")


def render_detail(frame, session: Optional[DetailSession]) -> None:
    for child in frame.editor_host.winfo_children():
        child.destroy()

    if session is None:
        frame.key_var.set("Select an entry to see its details.")
        frame.type_var.set("")
        _set_text(frame.text, "")
        frame.btn_edit.configure(state="disabled")
        frame.btn_cancel.configure(state="disabled")
        frame.badge.set(text="Viewing", level="idle")
        return

    detail = session.detail
    frame.key_var.set(detail.key)
    frame.type_var.set(detail.type_label)
    _set_text(frame.text, detail.text)

    editing = session.state is EditState.EDITING
    frame.edit_label.set("Done" if editing else "Edit")
    frame.btn_edit.configure(state="normal" if session.editable else "disabled")
    frame.btn_cancel.configure(state="normal" if editing else "disabled")

    result = session.last_result
    if editing and result is not None and not result.ok:
        frame.badge.set(text=f"Save failed: {result.error}", level="error")
    elif editing:
        frame.badge.set(text="Editing", level="editing")
    elif not session.editable:
        frame.badge.set(text="Read-only", level="idle")
    else:
        frame.badge.set(text="Viewing", level="idle")

    if editing and session.editor is not None:
        build_editor(frame.editor_host, session.editor, badge=frame.badge)


def _text_entry(host, editor, on_change: Callable[[str], object], badge: StatusBadge, reject_msg: str) -> None:
    var = tk.StringVar(master=host, value=editor.text)

    def _changed(*_args) -> None:
        if on_change(var.get()) is None:
            badge.set(text=reject_msg, level="warn")
        else:
            badge.set(text="Editing", level="editing")

    var.trace_add("write", _changed)
    ttk.Entry(host, textvariable=var).grid(row=0, column=0, sticky="ew")


def build_editor(host, editor: ValueEditor, *, badge: StatusBadge) -> None:
    """Create the widgets for *editor* inside *host*."""

    def _rebuild() -> None:
        for child in host.winfo_children():
            child.destroy()
        build_editor(host, editor, badge=badge)

    if isinstance(editor, StringEditor):
        _text_entry(host, editor, editor.set_text, badge, "")
    elif isinstance(editor, IntegerEditor):
        _text_entry(host, editor, editor.set_text, badge, "Not an integer, keeping last value")
    elif isinstance(editor, BinaryEditor):
        _text_entry(host, editor, editor.set_text, badge, f"Not valid {editor.encoding}, keeping last value")
    elif isinstance(editor, BooleanEditor):
        var = tk.BooleanVar(master=host, value=editor.value.flag)
        ttk.Checkbutton(host, text="Enabled", variable=var, command=lambda: editor.set_flag(var.get())).grid(
            row=0, column=0, sticky="w"
        )
    elif isinstance(editor, ListEditor):
        for i, item_text in enumerate(editor.texts):
            var = tk.StringVar(master=host, value=item_text)
            var.trace_add("write", lambda *_a, i=i, var=var: editor.set_item(i, var.get()))
            ttk.Entry(host, textvariable=var).grid(row=i, column=0, sticky="ew", pady=1)
            ttk.Button(host, text="−", width=2, command=lambda i=i: (editor.remove_item(i), _rebuild())).grid(
                row=i, column=1, padx=(4, 0)
            )
        ttk.Button(host, text="Add item", command=lambda: (editor.add_item(), _rebuild())).grid(
            row=len(editor.texts), column=0, sticky="w", pady=(4, 0)
        )
    elif isinstance(editor, MapEditor):
        host.columnconfigure(1, weight=1)
        for i, (key_text, value_text) in enumerate(zip(editor.keys, editor.value_texts)):
            key_var = tk.StringVar(master=host, value=key_text)
            val_var = tk.StringVar(master=host, value=value_text)
            key_var.trace_add("write", lambda *_a, i=i, v=key_var: (editor.set_key(i, v.get()), _warn_duplicates(editor, badge)))
            val_var.trace_add("write", lambda *_a, i=i, v=val_var: editor.set_value(i, v.get()))
            ttk.Entry(host, textvariable=key_var, width=18).grid(row=i, column=0, sticky="ew", pady=1)
            ttk.Entry(host, textvariable=val_var).grid(row=i, column=1, sticky="ew", padx=(4, 0), pady=1)
            ttk.Button(host, text="−", width=2, command=lambda i=i: (editor.remove_pair(i), _rebuild())).grid(
                row=i, column=2, padx=(4, 0)
            )
        ttk.Button(host, text="Add pair", command=lambda: (editor.add_pair(), _rebuild())).grid(
            row=len(editor.keys), column=0, sticky="w", pady=(4, 0)
        )
    else:
        ttk.Label(host, text=getattr(editor, "message", ""), foreground="#616161").grid(row=0, column=0, sticky="w")


def _warn_duplicates(editor: MapEditor, badge: StatusBadge) -> None:
    dupes = editor.duplicate_keys()
    if dupes:
        badge.set(text=f"Duplicate key {dupes[0]!r}: last pair wins", level="warn")
    else:
        badge.set(text="Editing", level="editing")
