"""Entry list with search box."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Dict, Sequence

from ..state import ListRow


def build_panel(parent, app) -> ttk.Frame:
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)
    frame.rowconfigure(1, weight=1)

    search = ttk.Entry(frame, textvariable=app.var_query)
    search.grid(row=0, column=0, columnspan=2, sticky="ew", padx=8, pady=(8, 4))

    tree = ttk.Treeview(frame, columns=("key", "value"), show="headings", selectmode="browse")
    tree.heading("key", text="Key")
    tree.heading("value", text="Value")
    tree.column("key", width=220, stretch=False)
    tree.column("value", width=260)
    tree.grid(row=1, column=0, sticky="nsew", padx=(8, 0), pady=(0, 8))

    scroll = ttk.Scrollbar(frame, orient=tk.VERTICAL, command=tree.yview)
    scroll.grid(row=1, column=1, sticky="ns", padx=(0, 8), pady=(0, 8))
    tree.configure(yscrollcommand=scroll.set)

    count_var = tk.StringVar(master=frame, value="")
    ttk.Label(frame, textvariable=count_var, foreground="#616161").grid(row=2, column=0, sticky="w", padx=8, pady=(0, 8))

    # Tree item ids are generated; store keys may be empty or contain anything.
    row_keys: Dict[str, str] = {}

    def _on_select(_event=None) -> None:
        sel = tree.selection()
        if sel and sel[0] in row_keys:
            app._on_select(row_keys[sel[0]])

    tree.bind("<<TreeviewSelect>>", _on_select)
    app.var_query.trace_add("write", lambda *_args: app.refresh_rows())

    frame.tree = tree  # type: ignore[attr-defined]
    frame.row_keys = row_keys  # type: ignore[attr-defined]
    frame.count_var = count_var  # type: ignore[attr-defined]
    return frame


def render_rows(frame: ttk.Frame, rows: Sequence[ListRow], *, total: int) -> None:
    tree: ttk.Treeview = frame.tree  # type: ignore[attr-defined]
    row_keys: Dict[str, str] = frame.row_keys  # type: ignore[attr-defined]

    tree.delete(*tree.get_children(""))
    row_keys.clear()
    for row in rows:
        iid = tree.insert("", "end", values=(row.key, row.summary))
        row_keys[iid] = row.key

    if len(rows) == total:
        frame.count_var.set(f"{total} entries")  # type: ignore[attr-defined]
    else:
        frame.count_var.set(f"{len(rows)} of {total} entries")  # type: ignore[attr-defined]
