"""GUI application entrypoint."""

from __future__ import annotations

import logging
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, ttk
from typing import Optional

from .. import __version__
from ..adapter import StoreAdapter
from ..log_utils import setup_logging
from ..settings import SettingsStore
from ..stores import MemoryStore, open_store
from .controller import DetailSession, InspectorController
from .events import GuiEvents
from .panels import panel_detail, panel_list, panel_logs
from .state import EditState, GuiState

logger = logging.getLogger(__name__)


class PrefsInspectorGUI(tk.Tk):
    """List + detail window over one settings store."""

    TAB_LABELS = (
        ("entries", "Entries"),
        ("logs", "Logs"),
    )

    def __init__(
        self,
        store_path: Optional[str] = None,
        store_format: Optional[str] = None,
        *,
        settings_store: Optional[SettingsStore] = None,
    ):
        super().__init__()
        self.root = self

        self._settings_store = settings_store or SettingsStore()
        self.home = self._settings_store.home
        persisted = self._settings_store.load()

        self.gui_state = GuiState(
            store_path=store_path or persisted.get("store_path"),
            store_format=store_format or persisted.get("store_format"),
            query=persisted.get("last_query") or "",
        )
        self.events = GuiEvents()
        self.events.on_value_committed(self._on_value_committed)
        self.events.on_write_failed(lambda _result: self._render_detail())

        self.controller = InspectorController(
            self._make_adapter(),
            events=self.events,
            binary_encoding=self._settings_store.binary_text_encoding(),
        )
        self.session: Optional[DetailSession] = None

        self.var_query = tk.StringVar(master=self, value=self.gui_state.query)

        self._update_title()
        self._build_menu()
        self._init_notebook()

        geometry = persisted.get("window_geometry")
        if isinstance(geometry, str) and geometry:
            try:
                self.geometry(geometry)
            except tk.TclError:
                logger.warning("Ignoring invalid window geometry %r", geometry)
        else:
            self.geometry("900x560")

        self.protocol("WM_DELETE_WINDOW", self._on_close)
        self.refresh()

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def _make_adapter(self) -> StoreAdapter:
        path = self.gui_state.store_path
        if not path:
            logger.info("No store selected; starting with an empty in-memory store")
            return StoreAdapter(MemoryStore())
        try:
            store = open_store(path, self.gui_state.store_format)
        except ValueError as e:
            logger.warning("%s; starting with an empty in-memory store", e)
            return StoreAdapter(MemoryStore())
        logger.info("Opened store %s", path)
        return StoreAdapter(store)

    def _update_title(self) -> None:
        name = Path(self.gui_state.store_path).name if self.gui_state.store_path else "no store"
        self.title(f"Preferences Inspector {__version__} – {name}")

    def _build_menu(self) -> None:
        menubar = tk.Menu(self)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Open store…", command=self._on_open_store)
        file_menu.add_command(label="Reload", command=self.refresh)
        file_menu.add_separator()
        file_menu.add_command(label="Quit", command=self._on_close)
        menubar.add_cascade(label="File", menu=file_menu)
        self.config(menu=menubar)

    def _init_notebook(self) -> None:
        self.notebook = ttk.Notebook(self)
        self.notebook.pack(fill="both", expand=True)

        entries_tab = ttk.PanedWindow(self.notebook, orient=tk.HORIZONTAL)
        self.list_panel = panel_list.build_panel(entries_tab, self)
        self.detail_panel = panel_detail.build_panel(entries_tab, self)
        entries_tab.add(self.list_panel, weight=2)
        entries_tab.add(self.detail_panel, weight=3)

        tabs = {"entries": entries_tab, "logs": panel_logs.build_panel(self.notebook, self)}
        for name, label in self.TAB_LABELS:
            self.notebook.add(tabs[name], text=label)

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """Take a new snapshot and redraw the list."""
        self.controller.refresh()
        self.refresh_rows()

    def refresh_rows(self) -> None:
        self.gui_state.query = self.var_query.get()
        rows = self.controller.rows(self.gui_state.query)
        panel_list.render_rows(self.list_panel, rows, total=len(self.controller.snapshot))

    def _on_select(self, key: str) -> None:
        # Re-selecting re-reads the store unless an edit is in progress
        if self.session is not None and self.session.key == key and self.session.state is EditState.EDITING:
            return
        self.session = self.controller.open_detail(key)
        if self.session is None:
            self.refresh()
        self._render_detail()

    # ------------------------------------------------------------------
    # Detail / edit
    # ------------------------------------------------------------------

    def _render_detail(self) -> None:
        panel_detail.render_detail(self.detail_panel, self.session)

    def _on_toggle_edit(self) -> None:
        if self.session is None:
            return
        self.session.toggle_edit()
        self._render_detail()

    def _on_cancel_edit(self) -> None:
        if self.session is None:
            return
        self.session.discard()
        self._render_detail()

    def _on_value_committed(self, key: str, _value) -> None:
        self.refresh()
        self.after_idle(lambda: self.detail_panel.badge.set(text=f"Saved {key}", level="ok"))

    # ------------------------------------------------------------------
    # Store selection / persistence
    # ------------------------------------------------------------------

    def _on_open_store(self) -> None:
        path = filedialog.askopenfilename(
            title="Open settings store",
            filetypes=[("Property lists", "*.plist"), ("JSON", "*.json"), ("All files", "*")],
        )
        if not path:
            return
        self.gui_state.store_path = path
        self.gui_state.store_format = None
        self._settings_store.remember_store(path)
        self.controller.adapter = self._make_adapter()
        self.session = None
        self._update_title()
        self._render_detail()
        self.refresh()

    def _persist_settings(self) -> None:
        try:
            data = self._settings_store.load()
            data["last_query"] = self.var_query.get()
            data["window_geometry"] = self.geometry()
            if self.gui_state.store_path:
                data["store_path"] = self.gui_state.store_path
                data["store_format"] = self.gui_state.store_format
            self._settings_store.save(data)
        except OSError:
            logger.exception("Failed to save settings")

    def _on_close(self) -> None:
        self._persist_settings()
        self.destroy()


def main(store_path: Optional[str] = None, store_format: Optional[str] = None) -> None:
    """Start the Tk GUI application."""
    log_path = setup_logging()
    if log_path:
        logger.info("Preferences Inspector %s, logging to %s", __version__, log_path)
    app = PrefsInspectorGUI(store_path, store_format)
    app.mainloop()


if __name__ == "__main__":
    main()
