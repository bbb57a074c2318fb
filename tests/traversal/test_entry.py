"""Unit tests for Entry and entry classification."""

import os
from pathlib import Path

import pytest

from ftrek.exceptions import RootUnreachableError
from ftrek.traversal.entry import Entry, classify, root_entry
from ftrek.types import EntryKind


def test_entry_depth_and_child():
    root = Entry(Path("root"), "root", EntryKind.DIRECTORY)
    child = root.child("src", EntryKind.DIRECTORY, is_last=False)
    grandchild = child.child("main.py", EntryKind.REGULAR, is_last=True)

    assert root.depth == 0
    assert child.depth == 1
    assert grandchild.depth == 2
    assert grandchild.parts == ("src", "main.py")
    assert grandchild.path == Path("root") / "src" / "main.py"
    assert child.is_dir
    assert not grandchild.is_dir
    assert child.is_last is False


def test_entry_is_immutable():
    entry = Entry(Path("a"), "a", EntryKind.REGULAR)
    with pytest.raises(AttributeError):
        entry.kind = EntryKind.DIRECTORY  # type: ignore[misc]


def test_classify_directory_and_regular(tmp_path):
    (tmp_path / "dir").mkdir()
    (tmp_path / "file.txt").write_text("x")
    assert classify(tmp_path / "dir") is EntryKind.DIRECTORY
    assert classify(tmp_path / "file.txt") is EntryKind.REGULAR


@pytest.mark.skipif(os.name != "posix", reason="Executable bits are POSIX-only")
def test_classify_executable(tmp_path):
    script = tmp_path / "run.sh"
    script.write_text("#!/bin/sh\n")
    script.chmod(0o755)
    assert classify(script) is EntryKind.EXECUTABLE


@pytest.mark.skipif(os.name != "posix", reason="Executable bits are POSIX-only")
def test_classify_executable_directory_is_directory(tmp_path):
    directory = tmp_path / "bin"
    directory.mkdir(mode=0o755)
    assert classify(directory) is EntryKind.DIRECTORY


def test_classify_symlink_takes_precedence(tmp_path):
    (tmp_path / "target").mkdir()
    try:
        os.symlink(tmp_path / "target", tmp_path / "link")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")
    assert classify(tmp_path / "link") is EntryKind.SYMLINK


def test_classify_broken_symlink(tmp_path):
    try:
        os.symlink(tmp_path / "missing", tmp_path / "dangling")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")
    assert classify(tmp_path / "dangling") is EntryKind.SYMLINK


def test_classify_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        classify(tmp_path / "missing")


def test_root_entry_keeps_path_verbatim(tmp_path):
    entry = root_entry(str(tmp_path))
    assert entry.name == str(tmp_path)
    assert entry.kind is EntryKind.DIRECTORY
    assert entry.depth == 0


def test_root_entry_follows_symlinked_root(tmp_path):
    (tmp_path / "real").mkdir()
    try:
        os.symlink(tmp_path / "real", tmp_path / "alias")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")
    assert root_entry(tmp_path / "alias").kind is EntryKind.DIRECTORY


def test_root_entry_missing(tmp_path):
    with pytest.raises(RootUnreachableError) as excinfo:
        root_entry(tmp_path / "missing")
    assert excinfo.value.path == str(tmp_path / "missing")


def test_root_entry_not_a_directory(tmp_path):
    file_path = tmp_path / "file.txt"
    file_path.write_text("x")
    with pytest.raises(RootUnreachableError, match="Not a directory"):
        root_entry(file_path)
