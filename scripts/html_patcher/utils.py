#!/usr/bin/env python3
"""
Utility functions for patching.
Includes progress output, file I/O that round-trips bytes, and the fatal error type.
"""
from pathlib import Path

from tqdm import tqdm


class PatchError(RuntimeError):
    """Input no longer matches the structure a patch relies on."""


def log(msg: str = "") -> None:
    """Print a progress line without breaking an active progress bar."""
    tqdm.write(msg)


def read_text(path: Path) -> str:
    # newline="" and surrogateescape keep line endings and stray bytes intact
    with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        return f.read()


def write_text(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        f.write(content)
