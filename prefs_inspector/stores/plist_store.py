"""Property-list preferences domain (``~/Library/Preferences/<domain>.plist``)."""

from __future__ import annotations

import plistlib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

from ..errors import StoreUnavailableError, StoreWriteError
from .base import atomic_write_bytes


def default_domain_path(domain: str) -> Path:
    return Path.home() / "Library" / "Preferences" / f"{domain}.plist"


@dataclass
class PlistStore:
    """A preferences domain stored as one plist file.

    The on-disk format (XML or binary) is kept when writing back.
    """

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(self.path).expanduser()

    def _load(self) -> Tuple[Dict[str, Any], plistlib.PlistFormat]:
        if not self.path.exists():
            return {}, plistlib.FMT_XML
        try:
            raw = self.path.read_bytes()
            data = plistlib.loads(raw)
        except Exception as e:
            raise StoreUnavailableError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreUnavailableError(f"{self.path}: plist root is not a dictionary")
        fmt = plistlib.FMT_BINARY if raw.startswith(b"bplist") else plistlib.FMT_XML
        return data, fmt

    def read_all(self) -> Dict[str, Any]:
        data, _fmt = self._load()
        return data

    def read(self, key: str) -> Any:
        return self.read_all()[key]

    def write(self, key: str, raw: Any) -> None:
        try:
            data, fmt = self._load()
        except StoreUnavailableError as e:
            raise StoreWriteError(str(e)) from e
        data[key] = raw
        try:
            payload = plistlib.dumps(data, fmt=fmt, sort_keys=True)
        except (TypeError, ValueError, OverflowError) as e:
            raise StoreWriteError(f"Value for {key!r} is not representable in a plist: {e}") from e
        atomic_write_bytes(self.path, payload)
