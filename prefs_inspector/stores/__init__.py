"""Settings store backends.

All backends implement :class:`PreferenceStore`: ``read_all``, ``read`` and
``write`` over raw Python values. :func:`open_store` picks one for a path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .base import PreferenceStore
from .json_store import JsonStore
from .memory_store import MemoryStore
from .plist_store import PlistStore, default_domain_path

STORE_FORMATS = ("plist", "json")


def detect_format(path: Union[str, Path]) -> str:
    suffix = Path(path).suffix.lower()
    if suffix == ".json":
        return "json"
    return "plist"


def open_store(path: Union[str, Path], fmt: Optional[str] = None) -> PreferenceStore:
    """Open the store at *path*; *fmt* overrides detection by file suffix."""
    fmt = (fmt or detect_format(path)).lower()
    if fmt == "json":
        return JsonStore(Path(path))
    if fmt == "plist":
        return PlistStore(Path(path))
    raise ValueError(f"Unknown store format: {fmt!r} (expected one of {', '.join(STORE_FORMATS)})")


__all__ = [
    "STORE_FORMATS",
    "JsonStore",
    "MemoryStore",
    "PlistStore",
    "PreferenceStore",
    "default_domain_path",
    "detect_format",
    "open_store",
]
