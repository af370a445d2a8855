"""Tk shell for the inspector.

Lazy attribute access keeps ``import prefs_inspector.gui.controller`` free of
tkinter so the headless parts can be tested without a display.
"""

from __future__ import annotations

from typing import Any

__all__ = ["PrefsInspectorGUI", "main"]


def __getattr__(name: str) -> Any:
    if name in {"PrefsInspectorGUI", "main"}:
        from .app import PrefsInspectorGUI, main

        return {"PrefsInspectorGUI": PrefsInspectorGUI, "main": main}[name]
    raise AttributeError(name)
