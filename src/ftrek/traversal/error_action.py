"""Policy for entries below the root that cannot be read during traversal."""

import logging
from enum import Enum

from ftrek.exceptions import UnreadableEntryError
from ftrek.types import PathType

logger = logging.getLogger(__name__)


class ErrorAction(str, Enum):
    """Action to take when an entry below the root cannot be read.

    Values:
        IGNORE: Skip the entry silently (default behavior)
        WARN: Skip the entry and log a warning
        RAISE: Raise UnreadableEntryError immediately
    """

    IGNORE = "ignore"
    WARN = "warn"
    RAISE = "raise"


def handle_unreadable(action: ErrorAction, path: PathType, error: OSError) -> None:
    """Apply ``action`` to an entry that could not be read.

    Args:
        action: The configured error action.
        path: Path of the unreadable entry.
        error: The error raised while reading it.

    Raises:
        UnreadableEntryError: If ``action`` is RAISE.
    """
    reason = error.strerror or str(error)
    if action is ErrorAction.RAISE:
        raise UnreadableEntryError(path, reason) from error
    if action is ErrorAction.WARN:
        logger.warning("Skipping %s: %s", path, reason)
