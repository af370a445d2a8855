"""In-process store, mostly for tests and demos."""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional

from ..errors import StoreWriteError


class MemoryStore:
    def __init__(self, initial: Optional[Mapping[str, Any]] = None, *, read_only: bool = False):
        self._data: Dict[str, Any] = copy.deepcopy(dict(initial or {}))
        self.read_only = read_only

    def read_all(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def read(self, key: str) -> Any:
        return copy.deepcopy(self._data[key])

    def write(self, key: str, raw: Any) -> None:
        if self.read_only:
            raise StoreWriteError("store is read-only")
        self._data[key] = copy.deepcopy(raw)
