"""Public API surface.

Re-exports the headless building blocks so scripts can import a single
module without pulling in tkinter.
"""

from __future__ import annotations

from . import __version__

# Value model
from .values import DynamicValue, Entry, Kind, VBinary, VBoolean, VInteger, VList, VMap, VOther, VString
from .classify import classify, to_raw

# Presentation
from .render import Detail, describe, render_detail, summarize, type_label
from .search import filter_entries, matches, sorted_entries

# Editing
from .editors import (
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

# Stores
from .errors import StoreError, StoreUnavailableError, StoreWriteError
from .stores import JsonStore, MemoryStore, PlistStore, default_domain_path, open_store
from .adapter import StoreAdapter, WriteResult

# Presenter
from .gui.controller import DetailSession, InspectorController
from .gui.state import EditState, ListRow

__all__ = [
    "__version__",
    "BinaryEditor",
    "BooleanEditor",
    "Detail",
    "DetailSession",
    "DynamicValue",
    "EditState",
    "Entry",
    "InspectorController",
    "IntegerEditor",
    "JsonStore",
    "Kind",
    "ListEditor",
    "ListRow",
    "MapEditor",
    "MemoryStore",
    "PlistStore",
    "StoreAdapter",
    "StoreError",
    "StoreUnavailableError",
    "StoreWriteError",
    "StringEditor",
    "UnsupportedEditor",
    "VBinary",
    "VBoolean",
    "VInteger",
    "VList",
    "VMap",
    "VOther",
    "VString",
    "WriteResult",
    "classify",
    "default_domain_path",
    "describe",
    "edit_binary",
    "edit_boolean",
    "edit_integer",
    "edit_string",
    "editor_for",
    "filter_entries",
    "matches",
    "open_store",
    "render_detail",
    "sorted_entries",
    "summarize",
    "to_raw",
    "type_label",
]
