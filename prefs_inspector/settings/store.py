from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from ..editors import BINARY_TEXT_ENCODINGS, DEFAULT_BINARY_TEXT_ENCODING

log = logging.getLogger(__name__)

MAX_RECENT_STORES = 10


def inspector_home() -> Path:
    # Shared with the log file
    return Path.home() / ".prefs_inspector"


def default_settings() -> Dict[str, Any]:
    return {
        "schema_version": 1,
        "last_opened_at": None,
        "store_path": None,
        "store_format": None,
        "binary_text_encoding": DEFAULT_BINARY_TEXT_ENCODING,
        "last_query": "",
        "recent_stores": [],
        "window_geometry": None,
    }


@dataclass
class SettingsStore:
    """Load/save persistent settings.

    Settings stay a plain dict so unknown keys written by newer versions
    survive a load/save cycle.
    """

    filename: str = "settings.json"
    home: Path = field(default_factory=inspector_home)

    def path(self) -> Path:
        return self.home / self.filename

    def load(self) -> Dict[str, Any]:
        path = self.path()
        base = default_settings()

        if not path.exists():
            return base

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("settings.json root is not an object")
            merged = dict(base)
            merged.update(data)
            return merged
        except Exception as e:
            log.warning("Ignoring unreadable settings file %s: %s", path, e)
            try:
                ts = time.strftime("%Y%m%d_%H%M%S")
                bak = path.with_name(f"{path.name}.bak.{ts}")
                bak.write_bytes(path.read_bytes())
            except OSError:
                log.exception("Could not back up %s", path)
            return base

    def save(self, data: Dict[str, Any]) -> None:
        self.home.mkdir(parents=True, exist_ok=True)
        path = self.path()
        tmp = path.with_suffix(path.suffix + ".tmp")

        # Shallow copy so the caller's dict is not stamped
        payload = dict(data or {})
        payload.setdefault("schema_version", 1)
        payload["last_opened_at"] = time.strftime("%Y-%m-%dT%H:%M:%S")

        txt = json.dumps(payload, indent=2, sort_keys=True)
        tmp.write_text(txt, encoding="utf-8")
        os.replace(tmp, path)

    # Convenience helpers -------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        return self.load().get(key, default)

    def update(self, patch: Dict[str, Any]) -> None:
        data = self.load()
        data.update(patch)
        self.save(data)

    def binary_text_encoding(self) -> str:
        enc = self.get("binary_text_encoding")
        if enc not in BINARY_TEXT_ENCODINGS:
            return DEFAULT_BINARY_TEXT_ENCODING
        return enc

    def remember_store(self, store_path: str, store_format: Optional[str] = None) -> None:
        """Record *store_path* as the current store, most recent first."""
        data = self.load()
        store_path = str(store_path)
        recent = [p for p in (data.get("recent_stores") or []) if isinstance(p, str) and p != store_path]
        data["store_path"] = store_path
        data["store_format"] = store_format
        data["recent_stores"] = [store_path, *recent][:MAX_RECENT_STORES]
        self.save(data)
