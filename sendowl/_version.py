"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SendOwl Transport, a product of Garudex Labs

Package version, taken from the VERSION file next to setup.py.
"""

from pathlib import Path

VERSION_FILE = Path(__file__).resolve().parent.parent / "VERSION"


def read_version(path: Path = VERSION_FILE) -> str:
    """Return the stripped contents of ``path``, or ``"unknown"`` when absent."""
    try:
        text = path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return "unknown"
    return text or "unknown"


__version__ = read_version()
