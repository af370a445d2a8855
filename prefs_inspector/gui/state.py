"""Shared GUI state models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..values import Kind


class EditState(Enum):
    VIEWING = "viewing"
    EDITING = "editing"


@dataclass(frozen=True)
class ListRow:
    """One row of the entry list."""

    key: str
    summary: str
    kind: Kind


@dataclass
class GuiState:
    """Cross-panel UI state container."""

    store_path: Optional[str] = None
    store_format: Optional[str] = None
    query: str = ""


__all__ = ["EditState", "GuiState", "ListRow"]
