from __future__ import annotations

import datetime
import plistlib
from pathlib import Path

import pytest

from prefs_inspector.errors import StoreUnavailableError, StoreWriteError
from prefs_inspector.stores import JsonStore, MemoryStore, PlistStore, default_domain_path, open_store


def test_missing_files_read_as_empty_stores(tmp_path: Path) -> None:
    assert PlistStore(tmp_path / "none.plist").read_all() == {}
    assert JsonStore(tmp_path / "none.json").read_all() == {}


def test_plist_store_roundtrip_keeps_types(tmp_path: Path) -> None:
    store = PlistStore(tmp_path / "com.example.app.plist")
    when = datetime.datetime(2025, 2, 23, 10, 30)
    store.write("name", "Iris")
    store.write("volume", 7)
    store.write("blob", b"\x00\xff")
    store.write("when", when)
    store.write("flags", [True, False])

    data = store.read_all()
    assert data == {"name": "Iris", "volume": 7, "blob": b"\x00\xff", "when": when, "flags": [True, False]}
    assert store.read("volume") == 7
    with pytest.raises(KeyError):
        store.read("missing")


def test_plist_store_preserves_binary_format(tmp_path: Path) -> None:
    path = tmp_path / "bin.plist"
    path.write_bytes(plistlib.dumps({"a": 1}, fmt=plistlib.FMT_BINARY))

    PlistStore(path).write("b", 2)

    raw = path.read_bytes()
    assert raw.startswith(b"bplist")
    assert plistlib.loads(raw) == {"a": 1, "b": 2}


def test_plist_store_rejects_unrepresentable_values(tmp_path: Path) -> None:
    store = PlistStore(tmp_path / "x.plist")
    with pytest.raises(StoreWriteError):
        store.write("nothing", None)
    assert store.read_all() == {}


def test_corrupt_plist_is_unavailable(tmp_path: Path) -> None:
    path = tmp_path / "bad.plist"
    path.write_text("not a plist", encoding="utf-8")
    with pytest.raises(StoreUnavailableError):
        PlistStore(path).read_all()
    with pytest.raises(StoreWriteError):
        PlistStore(path).write("k", 1)


def test_json_store_rejects_bytes(tmp_path: Path) -> None:
    store = JsonStore(tmp_path / "settings.json")
    store.write("theme", "dark")
    with pytest.raises(StoreWriteError):
        store.write("blob", b"\x00")
    assert store.read_all() == {"theme": "dark"}


def test_json_store_non_object_root_is_unavailable(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(StoreUnavailableError):
        JsonStore(path).read_all()


def test_memory_store_returns_copies() -> None:
    store = MemoryStore({"list": [1, 2]})
    snap = store.read_all()
    snap["list"].append(3)
    assert store.read("list") == [1, 2]


def test_read_only_memory_store_rejects_writes() -> None:
    store = MemoryStore({"a": 1}, read_only=True)
    with pytest.raises(StoreWriteError):
        store.write("a", 2)
    assert store.read("a") == 1


def test_open_store_picks_backend(tmp_path: Path) -> None:
    assert isinstance(open_store(tmp_path / "a.plist"), PlistStore)
    assert isinstance(open_store(tmp_path / "a.json"), JsonStore)
    assert isinstance(open_store(tmp_path / "a.json", "plist"), PlistStore)
    with pytest.raises(ValueError):
        open_store(tmp_path / "a.ini", "ini")


def test_default_domain_path() -> None:
    path = default_domain_path("com.example.app")
    assert path.name == "com.example.app.plist"
    assert path.parent.name == "Preferences"
