"""File I/O operations for materializing a workspace."""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def ensure_directory(path: Path) -> None:
    """Create a directory and its parents; existing directories are fine.

    Args:
        path: Directory to create
    """
    path.mkdir(parents=True, exist_ok=True)


def exclusive_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file that must not exist yet.

    Raises ``FileExistsError`` when the path is already taken, including when
    another process created it after the caller checked. A partially written
    file is removed before the error propagates.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    handle = path.open("x", encoding="utf-8")
    try:
        with handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
    except (OSError, ValueError):
        path.unlink(missing_ok=True)
        raise
    os.chmod(path, mode)


def write_text_if_absent(path: Path, text: str) -> bool:
    """Write text unless the file exists. Returns True when written."""
    try:
        handle = path.open("x", encoding="utf-8")
    except FileExistsError:
        return False
    try:
        with handle:
            handle.write(text)
    except (OSError, ValueError):
        path.unlink(missing_ok=True)
        raise
    return True


def copy_if_absent(source, path: Path) -> bool:
    """Copy a file or package resource unless the target exists.

    Returns True when copied. A partial copy is removed before the error
    propagates.
    """
    with source.open("rb") as src:
        try:
            dst = path.open("xb")
        except FileExistsError:
            return False
        try:
            with dst:
                shutil.copyfileobj(src, dst)
        except OSError:
            path.unlink(missing_ok=True)
            raise
    return True
