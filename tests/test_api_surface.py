from __future__ import annotations


def test_api_reexports_resolve() -> None:
    from prefs_inspector import __version__, api

    assert api.__version__ == __version__
    missing = [name for name in api.__all__ if not hasattr(api, name)]
    assert missing == []


def test_api_snapshot_roundtrip_through_memory_store() -> None:
    from prefs_inspector import api

    adapter = api.StoreAdapter(api.MemoryStore({"Theme": "dark"}))
    entries = api.sorted_entries(adapter.load_all())
    assert [api.summarize(e.value) for e in api.filter_entries(entries, "theme")] == ["dark"]
