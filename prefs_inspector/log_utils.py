"""Logging setup and log text cleanup.

No GUI imports here so both the CLI and the Tk shell can use it.
"""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import Optional

from .settings import inspector_home

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_FILENAME = "prefs_inspector.log"

# CSI sequences plus single-character escapes.
_ANSI_ESCAPE_RE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
# C0 controls except tab and newline.
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


def log_path(home: Optional[Path] = None) -> Path:
    return (home or inspector_home()) / LOG_FILENAME


def setup_logging(home: Optional[Path] = None, *, level: int = logging.INFO) -> Optional[str]:
    """Configure logging to a persistent file plus stdout.

    Returns the log file path, or ``None`` if the file could not be opened.
    An existing logging configuration (e.g. when embedded) is left alone.
    """
    path = log_path(home)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        root = logging.getLogger()
        if not root.handlers:
            logging.basicConfig(
                level=level,
                format=LOG_FORMAT,
                handlers=[
                    logging.FileHandler(str(path), mode="a", encoding="utf-8"),
                    logging.StreamHandler(sys.stdout),
                ],
            )
    except OSError:
        logging.getLogger(__name__).exception("Could not open log file %s", path)
        return None

    def _excepthook(exc_type, exc, tb):
        logging.error("Unhandled exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook
    return str(path)


def sanitize_log(text: str) -> str:
    """Normalize captured log text for display in a text widget.

    - Carriage returns (``\\r``, ``\\r\\n``) become newlines.
    - ANSI escape sequences and stray control characters are stripped.
    """
    if not text:
        return ""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _ANSI_ESCAPE_RE.sub("", text)
    return _CONTROL_RE.sub("", text)
