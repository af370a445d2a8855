"""Normalized value model for settings store entries.

Raw store values are untyped; :func:`prefs_inspector.classify.classify` maps
them onto the small tagged union below. Every value carries its ``kind`` tag
so callers can dispatch on the tag instead of inspecting Python types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Union


class Kind(str, Enum):
    STRING = "String"
    INTEGER = "Integer"
    BOOLEAN = "Boolean"
    LIST = "List"
    MAP = "Map"
    BINARY = "Binary"
    OTHER = "Other"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class VString:
    text: str
    kind: ClassVar[Kind] = Kind.STRING


@dataclass
class VInteger:
    number: int
    kind: ClassVar[Kind] = Kind.INTEGER


@dataclass
class VBoolean:
    flag: bool
    kind: ClassVar[Kind] = Kind.BOOLEAN


@dataclass
class VList:
    items: List["DynamicValue"] = field(default_factory=list)
    kind: ClassVar[Kind] = Kind.LIST


@dataclass
class VMap:
    entries: Dict[str, "DynamicValue"] = field(default_factory=dict)
    kind: ClassVar[Kind] = Kind.MAP


@dataclass
class VBinary:
    data: bytes
    kind: ClassVar[Kind] = Kind.BINARY


@dataclass
class VOther:
    """Read-only catch-all (floats, dates, nulls ...).

    ``raw`` keeps the original object so containers holding it can be written
    back unchanged; it does not take part in equality.
    """

    description: str
    type_name: str = ""
    raw: Any = field(default=None, compare=False, repr=False)
    kind: ClassVar[Kind] = Kind.OTHER


DynamicValue = Union[VString, VInteger, VBoolean, VList, VMap, VBinary, VOther]


@dataclass
class Entry:
    key: str
    value: DynamicValue


__all__ = [
    "Kind",
    "VString",
    "VInteger",
    "VBoolean",
    "VList",
    "VMap",
    "VBinary",
    "VOther",
    "DynamicValue",
    "Entry",
]
