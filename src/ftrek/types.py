from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Classification of a filesystem entry for display purposes.

    Exactly one kind applies to an entry. Symlink status takes precedence over
    directory status, which takes precedence over the executable bit.

    Attributes:
        DIRECTORY: Directory (rendered with a trailing slash)
        SYMLINK: Symbolic link, never followed below the root
        EXECUTABLE: Regular file with any execute permission bit set
        REGULAR: Anything else
    """

    DIRECTORY = "directory"
    SYMLINK = "symlink"
    EXECUTABLE = "executable"
    REGULAR = "regular"
