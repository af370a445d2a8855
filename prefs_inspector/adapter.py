"""Store adapter: snapshots and single-key writes over a raw store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .classify import classify, to_raw
from .errors import StoreError
from .stores.base import PreferenceStore
from .values import DynamicValue

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteResult:
    key: str
    ok: bool
    error: Optional[str] = None


class StoreAdapter:
    """Normalizes a raw store into ``DynamicValue`` snapshots.

    Store failures never escape: an unavailable store yields an empty
    snapshot and a rejected write yields ``WriteResult(ok=False)``.
    """

    def __init__(self, store: PreferenceStore):
        self.store = store

    def load_all(self) -> Dict[str, DynamicValue]:
        try:
            raw = self.store.read_all()
        except StoreError as e:
            log.warning("Store unavailable, showing empty snapshot: %s", e)
            return {}
        return {str(key): classify(value) for key, value in raw.items()}

    def read(self, key: str) -> Optional[DynamicValue]:
        try:
            raw = self.store.read(key)
        except KeyError:
            return None
        except StoreError as e:
            log.warning("Could not read %r: %s", key, e)
            return None
        return classify(raw)

    def write(self, key: str, value: DynamicValue) -> WriteResult:
        try:
            self.store.write(key, to_raw(value))
        except StoreError as e:
            log.warning("Write of %r failed: %s", key, e)
            return WriteResult(key=key, ok=False, error=str(e))
        log.info("Wrote %r (%s)", key, value.kind.label)
        return WriteResult(key=key, ok=True)


__all__ = ["StoreAdapter", "WriteResult"]
