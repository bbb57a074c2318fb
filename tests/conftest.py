"""Shared fixtures for ftrek tests."""

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small project tree.

    Layout::

        README.md
        docs/guide.md
        empty/
        src/main.py
        src/utils/helpers.py
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "README.md").write_text("# Project\n")
    (root / "docs").mkdir()
    (root / "docs" / "guide.md").write_text("Guide\n")
    (root / "empty").mkdir()
    (root / "src").mkdir()
    (root / "src" / "main.py").write_text("def main(): pass\n")
    (root / "src" / "utils").mkdir()
    (root / "src" / "utils" / "helpers.py").write_text("def helper(): pass\n")
    return root


@pytest.fixture
def ignore_tree(tmp_path: Path) -> Path:
    """Create a tree with a .gitignore excluding a file and a directory."""
    root = tmp_path / "ignoring"
    root.mkdir()
    (root / ".gitignore").write_text("ignored.txt\nignored_dir/\n")
    (root / "kept.txt").write_text("kept")
    (root / "ignored.txt").write_text("ignored")
    (root / "ignored_dir").mkdir()
    (root / "ignored_dir" / "inside.txt").write_text("inside")
    return root
