"""ANSI styling of rendered entry names."""

import os
from typing import Any, Mapping, Optional

from ftrek.types import EntryKind

RESET_FOREGROUND = "\x1b[39m"

# SGR foreground codes per entry kind; kinds without a code are left unstyled
KIND_COLORS = {
    EntryKind.DIRECTORY: "\x1b[34m",
    EntryKind.SYMLINK: "\x1b[36m",
    EntryKind.EXECUTABLE: "\x1b[32m",
}


class Style:
    """Apply per-kind colors to rendered text.

    Attributes:
        color (bool): Whether escape sequences are emitted at all.

    Example:
        >>> Style(color=False).entry("src/", EntryKind.DIRECTORY)
        'src/'
        >>> Style(color=True).entry("src/", EntryKind.DIRECTORY)
        '\\x1b[34msrc/\\x1b[39m'
        >>> Style(color=True).entry("notes.txt", EntryKind.REGULAR)
        'notes.txt'
    """

    def __init__(self, color: bool = False) -> None:
        self.color = color

    def entry(self, text: str, kind: EntryKind) -> str:
        """Return ``text`` wrapped in the color for ``kind`` when color is enabled."""
        if not self.color:
            return text
        code = KIND_COLORS.get(kind)
        if code is None:
            return text
        return f"{code}{text}{RESET_FOREGROUND}"

    def branch(self, segment: str) -> str:
        """Return a box-drawing segment. Branches are never colored."""
        return segment


def color_enabled(stream: Any, environ: Optional[Mapping[str, str]] = None) -> bool:
    """Decide whether output written to ``stream`` should be colored.

    Color is disabled whenever ``NO_COLOR`` is present in the environment, whatever
    its value. Otherwise it is enabled only if ``stream`` is a terminal.

    Args:
        stream: The output stream, or an integer file descriptor.
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        True if escape sequences should be written.
    """
    if environ is None:
        environ = os.environ
    if "NO_COLOR" in environ:
        return False
    try:
        if isinstance(stream, int):
            return os.isatty(stream)
        return bool(stream.isatty())
    except (AttributeError, OSError, ValueError):
        return False
