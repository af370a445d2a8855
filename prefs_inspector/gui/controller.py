"""GUI controller (no Tk widget code).

Holds the list snapshot and the open detail session so the Tk panels only
render what this module hands them. Keep this free of tkinter/ttk imports so
it can be unit-tested headlessly.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..adapter import StoreAdapter, WriteResult
from ..editors import DEFAULT_BINARY_TEXT_ENCODING, ValueEditor, editor_for
from ..render import Detail, render_detail, summarize
from ..search import filter_entries, sorted_entries
from ..values import DynamicValue, Entry, Kind
from .events import GuiEvents
from .state import EditState, ListRow

log = logging.getLogger(__name__)


class DetailSession:
    """Detail/edit state for one selected key.

    States: VIEWING -> EDITING -> VIEWING. Emitted values collect in an
    uncommitted buffer; :meth:`commit` writes only the last emitted value,
    and only if something was emitted. A failed write leaves the session in
    EDITING with the buffer intact.
    """

    def __init__(
        self,
        key: str,
        value: DynamicValue,
        adapter: StoreAdapter,
        *,
        events: Optional[GuiEvents] = None,
        binary_encoding: str = DEFAULT_BINARY_TEXT_ENCODING,
    ):
        self.key = key
        self.value = value
        self.adapter = adapter
        self.events = events
        self.binary_encoding = binary_encoding
        self.state = EditState.VIEWING
        self.editor: Optional[ValueEditor] = None
        self.pending: Optional[DynamicValue] = None
        self.last_result: Optional[WriteResult] = None

    @property
    def detail(self) -> Detail:
        return render_detail(self.key, self.value)

    @property
    def editable(self) -> bool:
        return self.value.kind is not Kind.OTHER

    @property
    def dirty(self) -> bool:
        return self.pending is not None

    def _on_emit(self, new_value: DynamicValue) -> None:
        if new_value.kind is not self.value.kind:
            raise ValueError(f"Editor changed kind of {self.key!r}: {self.value.kind.label} -> {new_value.kind.label}")
        self.pending = new_value

    def begin_edit(self) -> ValueEditor:
        if self.state is EditState.EDITING and self.editor is not None:
            return self.editor
        self.pending = None
        self.last_result = None
        self.editor = editor_for(self.value, self._on_emit, binary_encoding=self.binary_encoding)
        self.state = EditState.EDITING
        return self.editor

    def stage(self, new_value: DynamicValue) -> None:
        """Put *new_value* into the edit buffer as if an editor had emitted it."""
        self.begin_edit()
        self._on_emit(new_value)

    def _end_edit(self) -> None:
        self.state = EditState.VIEWING
        self.editor = None
        self.pending = None

    def commit(self) -> Optional[WriteResult]:
        """Write the buffered value. Returns ``None`` when nothing was written."""
        if self.state is not EditState.EDITING:
            return None
        if self.pending is None:
            self._end_edit()
            return None

        result = self.adapter.write(self.key, self.pending)
        self.last_result = result
        if not result.ok:
            if self.events is not None:
                self.events.emit_write_failed(result)
            return result

        self.value = self.pending
        self._end_edit()
        if self.events is not None:
            self.events.emit_value_committed(self.key, self.value)
        return result

    def discard(self) -> None:
        self._end_edit()

    def toggle_edit(self) -> Optional[WriteResult]:
        """Edit/Done button: enter edit mode, or commit and leave it."""
        if self.state is EditState.VIEWING:
            self.begin_edit()
            return None
        return self.commit()


class InspectorController:
    """List/search/detail logic over a :class:`StoreAdapter`."""

    def __init__(
        self,
        adapter: StoreAdapter,
        *,
        events: Optional[GuiEvents] = None,
        binary_encoding: str = DEFAULT_BINARY_TEXT_ENCODING,
    ):
        self.adapter = adapter
        self.events = events or GuiEvents()
        self.binary_encoding = binary_encoding
        self.snapshot: Dict[str, DynamicValue] = {}
        self._entries: List[Entry] = []

    def refresh(self) -> Dict[str, DynamicValue]:
        self.snapshot = self.adapter.load_all()
        self._entries = sorted_entries(self.snapshot)
        log.info("Loaded snapshot with %d entries", len(self.snapshot))
        self.events.emit_snapshot_loaded(self.snapshot)
        return self.snapshot

    def entries(self, query: str = "") -> List[Entry]:
        return filter_entries(self._entries, query)

    def rows(self, query: str = "") -> List[ListRow]:
        return [ListRow(key=e.key, summary=summarize(e.value), kind=e.value.kind) for e in self.entries(query)]

    def open_detail(self, key: str) -> Optional[DetailSession]:
        """Open *key* with a fresh read; ``None`` if it no longer exists."""
        value = self.adapter.read(key)
        if value is None:
            log.info("Entry %r disappeared from the store", key)
            return None
        self.events.emit_entry_selected(key)
        return DetailSession(key, value, self.adapter, events=self.events, binary_encoding=self.binary_encoding)


__all__ = ["DetailSession", "InspectorController"]
