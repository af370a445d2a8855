"""Command line interface for the settings store inspector."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .adapter import StoreAdapter
from .editors import edit_binary, edit_boolean, edit_integer, edit_string
from .gui.controller import InspectorController
from .log_utils import setup_logging
from .settings import SettingsStore
from .stores import STORE_FORMATS, open_store
from .values import DynamicValue, Kind, VString

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_flag(text: str) -> Optional[bool]:
    t = text.strip().lower()
    if t in _TRUE:
        return True
    if t in _FALSE:
        return False
    return None


def _apply_text(current: DynamicValue, text: str, binary_encoding: str) -> Optional[DynamicValue]:
    """Run the scalar editor for *current*'s kind; ``None`` if rejected."""
    kind = current.kind
    if kind is Kind.STRING:
        return edit_string(current, text)
    if kind is Kind.INTEGER:
        return edit_integer(current, text)
    if kind is Kind.BOOLEAN:
        flag = _parse_flag(text)
        return None if flag is None else edit_boolean(current, flag)
    if kind is Kind.BINARY:
        return edit_binary(current, text, binary_encoding)
    return None


def _cmd_list(controller: InspectorController, args, out) -> int:
    rows = controller.rows(args.query or "")
    if not rows:
        print("  (no entries)", file=out)
        return 0
    width = max(len(r.key) for r in rows)
    for row in rows:
        print(f"  {row.key:<{width}}  {row.summary}", file=out)
    return 0


def _cmd_show(controller: InspectorController, args, out) -> int:
    session = controller.open_detail(args.key)
    if session is None:
        print(f"No such key: {args.key}", file=sys.stderr)
        return 2
    detail = session.detail
    print(f"Key:  {detail.key}", file=out)
    print(f"Type: {detail.type_label}", file=out)
    print("Value:", file=out)
    print(detail.text, file=out)
    return 0


def _commit(session, new_value: DynamicValue, out) -> int:
    session.stage(new_value)
    result = session.commit()
    if result is not None and not result.ok:
        print(f"Write failed: {result.error}", file=sys.stderr)
        return 1
    print(f"{session.key} = {session.detail.text}", file=out)
    return 0


def _cmd_set(controller: InspectorController, args, out, binary_encoding: str) -> int:
    session = controller.open_detail(args.key)
    if session is None:
        result = controller.adapter.write(args.key, VString(args.text))
        if not result.ok:
            print(f"Write failed: {result.error}", file=sys.stderr)
            return 1
        print(f"{args.key} = {args.text}", file=out)
        return 0

    current = session.value
    if current.kind in (Kind.LIST, Kind.MAP, Kind.OTHER):
        print(f"Cannot set {current.kind.label} values from the command line; use the GUI.", file=sys.stderr)
        return 2
    new_value = _apply_text(current, args.text, binary_encoding)
    if new_value is None:
        print(f"Rejected input for {current.kind.label} value: {args.text!r}", file=sys.stderr)
        return 2
    return _commit(session, new_value, out)


def _cmd_toggle(controller: InspectorController, args, out) -> int:
    session = controller.open_detail(args.key)
    if session is None:
        print(f"No such key: {args.key}", file=sys.stderr)
        return 2
    if session.value.kind is not Kind.BOOLEAN:
        print(f"{args.key} is a {session.value.kind.label}, not a Boolean", file=sys.stderr)
        return 2
    return _commit(session, edit_boolean(session.value), out)


def main(argv: Optional[List[str]] = None, *, settings_store: Optional[SettingsStore] = None) -> int:
    ap = argparse.ArgumentParser(prog="prefs-inspector", description="Inspect and edit key/value settings stores.")
    ap.add_argument("--store", default=None, help="Path to a .plist or .json store (default: last used store)")
    ap.add_argument("--format", default=None, choices=list(STORE_FORMATS), help="Store format (default: from suffix)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log to the console and log file")

    sub = ap.add_subparsers(dest="command", required=True)
    p_list = sub.add_parser("list", help="List entries sorted by key")
    p_list.add_argument("-q", "--query", default="", help="Case-insensitive filter")
    p_show = sub.add_parser("show", help="Show one entry in full")
    p_show.add_argument("key")
    p_set = sub.add_parser("set", help="Set a String/Integer/Boolean/Binary entry from text")
    p_set.add_argument("key")
    p_set.add_argument("text")
    p_toggle = sub.add_parser("toggle", help="Flip a Boolean entry")
    p_toggle.add_argument("key")
    sub.add_parser("gui", help="Open the graphical inspector")

    args = ap.parse_args(argv)

    if args.verbose:
        setup_logging()

    settings = settings_store or SettingsStore()
    store_path = args.store or settings.get("store_path")
    store_format = args.format or (None if args.store else settings.get("store_format"))

    if args.command == "gui":
        from .gui.app import main as gui_main

        gui_main(store_path, store_format)
        return 0

    if not store_path:
        ap.error("no store given and no previously used store recorded; pass --store PATH")

    try:
        store = open_store(store_path, store_format)
    except ValueError as e:
        ap.error(str(e))
    if args.store:
        settings.remember_store(args.store, args.format)

    binary_encoding = settings.binary_text_encoding()
    controller = InspectorController(StoreAdapter(store), binary_encoding=binary_encoding)
    controller.refresh()

    out = sys.stdout
    if args.command == "list":
        return _cmd_list(controller, args, out)
    if args.command == "show":
        return _cmd_show(controller, args, out)
    if args.command == "set":
        return _cmd_set(controller, args, out, binary_encoding)
    return _cmd_toggle(controller, args, out)


if __name__ == "__main__":
    raise SystemExit(main())
