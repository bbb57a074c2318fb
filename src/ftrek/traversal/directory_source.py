"""Unfiltered traversal source backed by direct directory listing."""

import os
from typing import Iterator, List

from ftrek.exceptions import RootUnreachableError
from ftrek.traversal.base_source import BaseTraversalSource
from ftrek.traversal.entry import Entry, classify_stat, root_entry
from ftrek.traversal.error_action import ErrorAction, handle_unreadable
from ftrek.types import PathType


class DirectorySource(BaseTraversalSource):
    """Traversal source that lists every entry under a root, unfiltered.

    Children are listed one directory at a time, in whatever order the operating
    system returns them; no sorting is applied. Because a whole listing is read
    before any child is returned, every child knows whether it is the last one at
    its level.

    Symbolic links below the root are reported as SYMLINK entries and never
    followed. Entries that cannot be read are handled according to
    ``error_action``; by default they are silently dropped and the traversal
    continues. Only a root that cannot be classified or listed is fatal.

    Attributes:
        root (Entry): The root entry.
        error_action (ErrorAction): How to handle unreadable entries below the root.

    Example:
        >>> source = DirectorySource("src")  # doctest: +SKIP
        >>> [child.name for child in source.children(source.root)]  # doctest: +SKIP
        ['ftrek']
    """

    def __init__(self, root: PathType, error_action: ErrorAction = ErrorAction.IGNORE) -> None:
        """Initialize a DirectorySource.

        Args:
            root: Path of the directory to traverse, kept verbatim for display.
            error_action: How to handle entries below the root that cannot be read.

        Raises:
            RootUnreachableError: If the root cannot be classified or is not a directory.
        """
        self.root = root_entry(root)
        self.error_action = error_action

    def children(self, entry: Entry) -> List[Entry]:
        """List the immediate children of a directory entry.

        Args:
            entry: A directory entry produced by this source.

        Returns:
            The readable children, each with ``is_last`` set. Empty for non-directories.

        Raises:
            RootUnreachableError: If ``entry`` is the root and it cannot be listed.
            UnreadableEntryError: If a child cannot be read and error_action is RAISE.
        """
        if not entry.is_dir:
            return []

        try:
            with os.scandir(entry.path) as it:
                dir_entries = list(it)
        except OSError as e:
            if entry.depth == 0:
                raise RootUnreachableError(entry.name, e.strerror or str(e)) from e
            handle_unreadable(self.error_action, entry.path, e)
            return []

        readable = []
        for dir_entry in dir_entries:
            try:
                kind = classify_stat(dir_entry.stat(follow_symlinks=False))
            except OSError as e:
                handle_unreadable(self.error_action, dir_entry.path, e)
                continue
            readable.append((dir_entry.name, kind))

        last_index = len(readable) - 1
        return [entry.child(name, kind, is_last=i == last_index) for i, (name, kind) in enumerate(readable)]

    def __iter__(self) -> Iterator[Entry]:
        yield self.root
        yield from self._descendants(self.root)

    def _descendants(self, entry: Entry) -> Iterator[Entry]:
        for child in self.children(entry):
            yield child
            yield from self._descendants(child)
