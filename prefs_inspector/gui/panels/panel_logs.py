"""Logs panel with file shortcut and error copy helper."""

from __future__ import annotations

import subprocess
import sys
import tkinter as tk
from pathlib import Path
from tkinter import messagebox, ttk

from ...log_utils import log_path, sanitize_log


def _open_path(path: Path) -> None:
    if not path.exists():
        raise FileNotFoundError(path)
    if sys.platform == "darwin":
        cmd = ["open", str(path)]
    elif sys.platform.startswith("win"):
        cmd = ["notepad", str(path)]
    else:
        cmd = ["xdg-open", str(path)]
    subprocess.Popen(cmd)


def read_log(path: Path) -> str:
    if not path.exists():
        return f"No log written yet ({path})."
    return sanitize_log(path.read_text(encoding="utf-8", errors="replace"))


def last_errors(text: str, limit: int = 20) -> str:
    lines = [ln for ln in text.splitlines() if "[error]" in ln.lower() or "[warning]" in ln.lower() or "traceback" in ln.lower()]
    return "\n".join(lines[-limit:]).strip()


def build_panel(parent, app=None) -> ttk.Frame:
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)
    frame.rowconfigure(0, weight=1)

    path = log_path(getattr(app, "home", None))

    box = tk.Text(frame, wrap="word", state="disabled")
    box.grid(row=0, column=0, sticky="nsew", padx=12, pady=(12, 8))

    actions = ttk.Frame(frame)
    actions.grid(row=1, column=0, sticky="ew", padx=12, pady=(0, 12))

    def _refresh() -> None:
        box.configure(state="normal")
        box.delete("1.0", tk.END)
        box.insert("1.0", read_log(path))
        box.configure(state="disabled")

    def _open_log() -> None:
        try:
            _open_path(path)
        except FileNotFoundError:
            messagebox.showinfo("Log", f"No log file at {path}.")

    def _copy_last_error() -> None:
        text = last_errors(read_log(path)) or "No warning or error lines in the log."
        frame.clipboard_clear()
        frame.clipboard_append(text)
        messagebox.showinfo("Logs", "Last errors copied to clipboard.")

    ttk.Button(actions, text="Refresh", command=_refresh).pack(side=tk.LEFT)
    ttk.Button(actions, text="Open log file", command=_open_log).pack(side=tk.LEFT, padx=(8, 0))
    ttk.Button(actions, text="Copy last errors", command=_copy_last_error).pack(side=tk.LEFT, padx=(8, 0))

    _refresh()
    return frame
