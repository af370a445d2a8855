"""Persistent settings for the inspector itself.

Not to be confused with the stores being inspected: this is the tool's own
state (last opened store, search query, binary text encoding, window
geometry), kept in a single versioned JSON file under the user's home folder.

Design goals:
  * Atomic writes (no corrupted settings on crash)
  * Resilient loads (backup and fall back to defaults)
"""

from .store import SettingsStore, default_settings, inspector_home

__all__ = ["SettingsStore", "default_settings", "inspector_home"]
