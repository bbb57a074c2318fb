"""Entry representation for filesystem nodes visited during a traversal."""

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from ftrek.exceptions import RootUnreachableError
from ftrek.types import EntryKind, PathType

_EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True)
class Entry:
    """One filesystem node encountered during a traversal.

    Entries are created fresh per traversal and discarded once rendered. The kind is
    fixed at creation time and never recomputed, even if the filesystem changes while
    the traversal is running.

    Attributes:
        path (Path): Filesystem path, built from the root exactly as supplied.
        name (str): Display name (the final path component).
        kind (EntryKind): Classification of the entry.
        parts (Tuple[str, ...]): Path components relative to the root. Empty for the root.
        is_last (Optional[bool]): Whether this is the last sibling at its level, or None
            when the source producing it has no sibling lookahead.

    Example:
        >>> entry = Entry(Path("root/src"), "src", EntryKind.DIRECTORY, ("src",), is_last=True)
        >>> entry.depth
        1
        >>> entry.is_dir
        True
    """

    path: Path
    name: str
    kind: EntryKind
    parts: Tuple[str, ...] = ()
    is_last: Optional[bool] = None

    @property
    def depth(self) -> int:
        """Number of path components below the root (the root itself is 0)."""
        return len(self.parts)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def child(self, name: str, kind: EntryKind, is_last: Optional[bool] = None) -> "Entry":
        """Create the entry for ``name`` inside this directory."""
        return Entry(self.path / name, name, kind, self.parts + (name,), is_last)


def classify_stat(st: os.stat_result) -> EntryKind:
    """Classify an entry from its ``lstat`` result.

    Symlink status wins over directory status, which wins over the executable bit.
    The executable bit is only meaningful on POSIX platforms; elsewhere files are
    always REGULAR.

    Args:
        st: Result of a stat call that did not follow symlinks.

    Returns:
        The entry kind.
    """
    if stat.S_ISLNK(st.st_mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(st.st_mode):
        return EntryKind.DIRECTORY
    if os.name == "posix" and stat.S_ISREG(st.st_mode) and st.st_mode & _EXECUTABLE_BITS:
        return EntryKind.EXECUTABLE
    return EntryKind.REGULAR


def classify(path: PathType) -> EntryKind:
    """Classify ``path`` with a single ``lstat`` call.

    Raises:
        OSError: If the metadata cannot be read.
    """
    return classify_stat(os.lstat(path))


def root_entry(root: PathType) -> Entry:
    """Build the depth-0 entry for a traversal root.

    The root is classified following symlinks, so a symlink pointing at a directory
    can be used as a root. The display name of the root is the path exactly as
    supplied.

    Args:
        root: The root path exactly as supplied by the caller.

    Returns:
        The root entry, always of kind DIRECTORY.

    Raises:
        RootUnreachableError: If the root does not exist, cannot be stat'ed, or is
            not a directory.
    """
    try:
        st = os.stat(root)
    except OSError as e:
        raise RootUnreachableError(root, e.strerror or str(e)) from e
    if not stat.S_ISDIR(st.st_mode):
        raise RootUnreachableError(root, "Not a directory")
    return Entry(Path(root), str(root), EntryKind.DIRECTORY, (), is_last=True)
