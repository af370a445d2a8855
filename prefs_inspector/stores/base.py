"""Raw store protocol shared by all backends."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Protocol

from ..errors import StoreWriteError


class PreferenceStore(Protocol):
    """A process-wide key/value store with an implementation-defined raw format.

    ``read_all`` returns a fresh copy (a snapshot); ``read`` raises
    ``KeyError`` for a missing key. Failures raise
    :class:`~prefs_inspector.errors.StoreError` subclasses.
    """

    def read_all(self) -> Dict[str, Any]:
        ...

    def read(self, key: str) -> Any:
        ...

    def write(self, key: str, raw: Any) -> None:
        ...


def atomic_write_bytes(path: Path, payload: bytes) -> None:
    """Write *payload* to *path* via a sibling temp file and ``os.replace``."""
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_bytes(payload)
        os.replace(tmp, path)
    except OSError as e:
        raise StoreWriteError(f"Cannot write {path}: {e}") from e
