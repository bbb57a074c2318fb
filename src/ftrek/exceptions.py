from typing import Optional

from ftrek.types import PathType


class RootUnreachableError(OSError):
    """
    Exception raised when the traversal root cannot be classified or listed.

    This is the only fatal traversal error. It is raised when the root path does not
    exist, is not a directory, or its listing cannot be read. The command-line
    interface reports it as ``Error: <message>`` and exits with status 1.

    Attributes:
        path (str): The root path exactly as supplied by the caller.

    Example:
        >>> error = RootUnreachableError("missing", "No such file or directory")
        >>> str(error)
        'Cannot read root directory missing: No such file or directory'
    """

    def __init__(self, path: PathType, reason: str) -> None:
        """
        Initialize the exception with the root path and a short reason.

        Args:
            path: The root path exactly as supplied by the caller.
            reason: Human-readable cause, usually the ``strerror`` of the underlying OSError.
        """
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read root directory {self.path}: {reason}")


class UnreadableEntryError(OSError):
    """
    Exception raised when an entry below the root cannot be read and the error action is RAISE.

    Entries below the root that fail to stat or list are skipped by default. This
    exception is only raised when the caller explicitly asks for unreadable entries
    to abort the traversal.

    Attributes:
        path (str): Path of the entry that could not be read.

    Example:
        >>> error = UnreadableEntryError("root/secret", "Permission denied")
        >>> str(error)
        'Cannot read root/secret: Permission denied'
    """

    def __init__(self, path: PathType, reason: Optional[str] = None) -> None:
        """
        Initialize the exception with the path of the unreadable entry.

        Args:
            path: Path of the entry that could not be read.
            reason: Human-readable cause. Defaults to "unreadable".
        """
        self.path = str(path)
        self.reason = reason or "unreadable"
        super().__init__(f"Cannot read {self.path}: {self.reason}")
