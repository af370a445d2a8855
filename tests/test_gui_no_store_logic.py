from pathlib import Path


def test_gui_contains_no_persistence_or_parsing_logic():
    """The Tk shell should only render what the controller hands it.

    Lightweight, grep-based regression test: store formats, value
    classification and text parsing belong to the headless modules.
    """

    repo_root = Path(__file__).resolve().parents[1]
    gui_dir = repo_root / "prefs_inspector" / "gui"
    assert gui_dir.is_dir(), "GUI directory not found"

    forbidden = [
        "import plistlib",
        "import json",
        "classify(",
        "bytes.fromhex",
        "int(",
        ".read_all(",
    ]

    for py in gui_dir.rglob("*.py"):
        txt = py.read_text(encoding="utf-8", errors="ignore")
        for token in forbidden:
            assert token not in txt, f"Found forbidden token '{token}' in GUI file: {py}"


def test_controller_is_headless():
    repo_root = Path(__file__).resolve().parents[1]
    txt = (repo_root / "prefs_inspector" / "gui" / "controller.py").read_text(encoding="utf-8")
    assert "import tkinter" not in txt
    assert "from tkinter" not in txt
