from abc import ABC, abstractmethod
from typing import Iterator

from ftrek.traversal.entry import Entry


class BaseTraversalSource(ABC):
    """Abstract base class for producers of filesystem entries.

    A traversal source yields the root entry first and then every reachable entry
    below it in depth-first pre-order. Each entry carries its path components
    relative to the root, which is enough for a renderer to reconstruct ancestry.
    Sources with sibling lookahead also fill in ``Entry.is_last``.

    Attributes:
        root (Entry): The depth-0 entry, validated at construction time.
    """

    root: Entry

    @abstractmethod
    def __iter__(self) -> Iterator[Entry]:
        """Yield the root entry followed by its descendants in pre-order."""
        pass
