"""Simple GUI event registry for decoupled panel communication."""

from __future__ import annotations

from typing import Any, Callable, Dict, List


class GuiEvents:
    """Small callback-based event hub shared by the controller and Tk panels."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Callable[..., None]]] = {
            "snapshot_loaded": [],
            "entry_selected": [],
            "value_committed": [],
            "write_failed": [],
        }

    def on_snapshot_loaded(self, callback: Callable[[Dict[str, Any]], None]) -> None:
        self._listeners["snapshot_loaded"].append(callback)

    def on_entry_selected(self, callback: Callable[[str], None]) -> None:
        self._listeners["entry_selected"].append(callback)

    def on_value_committed(self, callback: Callable[[str, Any], None]) -> None:
        self._listeners["value_committed"].append(callback)

    def on_write_failed(self, callback: Callable[[Any], None]) -> None:
        self._listeners["write_failed"].append(callback)

    def emit_snapshot_loaded(self, snapshot: Dict[str, Any]) -> None:
        for callback in self._listeners["snapshot_loaded"]:
            callback(snapshot)

    def emit_entry_selected(self, key: str) -> None:
        for callback in self._listeners["entry_selected"]:
            callback(key)

    def emit_value_committed(self, key: str, value: Any) -> None:
        for callback in self._listeners["value_committed"]:
            callback(key, value)

    def emit_write_failed(self, result: Any) -> None:
        for callback in self._listeners["write_failed"]:
            callback(result)


__all__ = ["GuiEvents"]
