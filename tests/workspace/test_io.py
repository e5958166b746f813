"""Tests for workspace/io.py."""

import io
from pathlib import Path

import pytest

from texcli.workspace.io import (
    copy_if_absent,
    ensure_directory,
    exclusive_write_text,
    write_text_if_absent,
)


def test_ensure_directory_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b"

    ensure_directory(target)
    ensure_directory(target)

    assert target.is_dir()


def test_exclusive_write_refuses_existing(tmp_path: Path) -> None:
    target = tmp_path / "doc.tex"
    target.write_text("keep", encoding="utf-8")

    with pytest.raises(FileExistsError):
        exclusive_write_text(target, "replace")

    assert target.read_text(encoding="utf-8") == "keep"


def test_write_text_if_absent(tmp_path: Path) -> None:
    target = tmp_path / "nb.ipynb"

    assert write_text_if_absent(target, "first")
    assert not write_text_if_absent(target, "second")
    assert target.read_text(encoding="utf-8") == "first"


def test_copy_if_absent(tmp_path: Path) -> None:
    source = tmp_path / "src.bin"
    source.write_bytes(b"\x00\x01")
    target = tmp_path / "dst.bin"

    assert copy_if_absent(source, target)
    assert not copy_if_absent(source, target)
    assert target.read_bytes() == b"\x00\x01"


def test_exclusive_write_removes_file_on_encoding_error(tmp_path: Path) -> None:
    target = tmp_path / "doc.tex"

    with pytest.raises(UnicodeEncodeError):
        exclusive_write_text(target, "x\udcff")

    assert not target.exists()


class _BrokenStream(io.BytesIO):
    """Yields one chunk, then fails like a dying disk."""

    def read(self, size: int = -1) -> bytes:
        if self.tell() == 0:
            return super().read(4)
        raise OSError("read failed")


class _BrokenSource:
    def open(self, mode: str) -> io.BytesIO:
        return _BrokenStream(b"\x89PNG and more")


def test_copy_if_absent_removes_partial_copy(tmp_path: Path) -> None:
    target = tmp_path / "sample.png"

    with pytest.raises(OSError):
        copy_if_absent(_BrokenSource(), target)

    assert not target.exists()
