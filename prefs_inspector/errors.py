"""Exceptions raised by store backends.

Backends raise these; :class:`~prefs_inspector.adapter.StoreAdapter` is the
only place that catches them and turns them into empty snapshots or failed
write results.
"""

from __future__ import annotations


class StoreError(RuntimeError):
    """Base class for settings store failures."""


class StoreUnavailableError(StoreError):
    """The store could not be read (missing permissions, malformed file, ...)."""


class StoreWriteError(StoreError):
    """A single-key write was rejected by the store layer."""
