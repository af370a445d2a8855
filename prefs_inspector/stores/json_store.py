"""JSON settings file store."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from ..errors import StoreUnavailableError, StoreWriteError
from .base import atomic_write_bytes


@dataclass
class JsonStore:
    """A settings file holding one JSON object.

    JSON has no binary type, so byte values are rejected on write.
    """

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(self.path).expanduser()

    def read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StoreUnavailableError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreUnavailableError(f"{self.path}: JSON root is not an object")
        return data

    def read(self, key: str) -> Any:
        return self.read_all()[key]

    def write(self, key: str, raw: Any) -> None:
        try:
            data = self.read_all()
        except StoreUnavailableError as e:
            raise StoreWriteError(str(e)) from e
        data[key] = raw
        try:
            txt = json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StoreWriteError(f"Value for {key!r} is not representable in JSON: {e}") from e
        atomic_write_bytes(self.path, (txt + "\n").encode("utf-8"))
