"""Ancestry state threaded through a single render pass."""

from contextlib import contextmanager
from typing import Iterator, List

BLANK = "    "
PIPE = "│   "
TEE = "├── "
ELBOW = "└── "


class PrefixStack:
    """Last-sibling flags of the ancestors of the entry being rendered.

    Index ``i`` records whether the ancestor at depth ``i + 1`` was the last sibling
    at its level. An ancestor that was last leaves a blank column below it; any
    other ancestor continues its vertical line.

    A stack belongs to exactly one render call and is never shared.

    Example:
        >>> stack = PrefixStack()
        >>> with stack.descend(False):
        ...     with stack.descend(True):
        ...         "".join(stack.fillers(len(stack)))
        '│       '
        >>> len(stack)
        0
    """

    def __init__(self) -> None:
        self._flags: List[bool] = []

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._flags)

    def __getitem__(self, index: int) -> bool:
        return self._flags[index]

    def push(self, is_last: bool) -> None:
        self._flags.append(is_last)

    def pop(self) -> bool:
        return self._flags.pop()

    def truncate(self, depth: int) -> None:
        """Drop every flag at index ``depth`` and beyond."""
        del self._flags[depth:]

    @contextmanager
    def descend(self, is_last: bool) -> Iterator["PrefixStack"]:
        """Push ``is_last`` for the duration of a subtree.

        The flag is popped however the block exits, including when a generator
        rendering the subtree is closed early.
        """
        self.push(is_last)
        try:
            yield self
        finally:
            self.pop()

    def fillers(self, count: int) -> Iterator[str]:
        """Yield the filler segment for each of the first ``count`` levels."""
        for is_last in self._flags[:count]:
            yield BLANK if is_last else PIPE


def connector(is_last: bool) -> str:
    """Return the segment joining an entry to its parent's vertical line."""
    return ELBOW if is_last else TEE
