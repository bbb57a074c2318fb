"""Directory tree rendering with streaming support.

This module ties a traversal source to the tree renderer. The source is chosen by
the ``gitignore`` flag: the unfiltered ``DirectorySource`` or the filtering
``IgnoreWalker``.
"""

import sys
from typing import Iterator, Optional, TextIO, Union

from ftrek.options import TrekOptions, resolve_color
from ftrek.rendering.styling import Style
from ftrek.rendering.tree_renderer import TreeRenderer
from ftrek.traversal.base_source import BaseTraversalSource
from ftrek.traversal.directory_source import DirectorySource
from ftrek.traversal.error_action import ErrorAction
from ftrek.traversal.ignore_walker import IgnoreWalker
from ftrek.types import PathType


class StreamingTrek:
    """Streaming directory tree printer.

    The root is validated on construction. Lines are produced lazily, so the
    filesystem is read while the tree is being written and memory use does not
    grow with the size of the tree.

    Attributes:
        directory (str): The root exactly as supplied; used as the root label.
        gitignore (bool): Whether hidden and gitignored entries are skipped.

    Example:
        >>> trek = StreamingTrek("src")  # doctest: +SKIP
        >>> for line in trek.stream_tree():  # doctest: +SKIP
        ...     print(line, end="")
        src/
        └── ftrek/
            └── __init__.py
        >>> trek.line_count  # doctest: +SKIP
        3

    Raises:
        RootUnreachableError: If the root does not exist or is not a directory.
        ValueError: If error_action is not a valid action name.
    """

    def __init__(
        self,
        directory: PathType = ".",
        *,
        gitignore: bool = False,
        color: bool = False,
        error_action: Union[str, ErrorAction] = ErrorAction.IGNORE,
    ) -> None:
        """Initialize streaming tree rendering.

        Args:
            directory: Root directory. Displayed verbatim on the first line.
            gitignore: Skip hidden and gitignored entries. Defaults to False.
            color: Color entry names by kind. Defaults to False.
            error_action: How to handle entries below the root that cannot be read.
                Either "ignore", "warn" or "raise", or an ErrorAction value.
        """
        if isinstance(error_action, str) and not isinstance(error_action, ErrorAction):
            try:
                error_action = ErrorAction(error_action.lower())
            except ValueError:
                raise ValueError(f"Invalid error_action: {error_action}. Must be one of: 'ignore', 'warn', 'raise'")

        self.directory = str(directory)
        self.gitignore = gitignore

        self._source: BaseTraversalSource
        if gitignore:
            self._source = IgnoreWalker(directory, error_action=error_action)
        else:
            self._source = DirectorySource(directory, error_action=error_action)

        self._renderer = TreeRenderer(self.directory, Style(color))
        self._line_count = 0
        self._tree_complete = False

    @classmethod
    def from_options(cls, options: TrekOptions, color: bool = False) -> "StreamingTrek":
        return cls(options.root, gitignore=options.gitignore, color=color, error_action=options.error_action)

    @property
    def line_count(self) -> int:
        """Number of lines streamed so far."""
        return self._line_count

    @property
    def streaming_complete(self) -> bool:
        return self._tree_complete

    def stream_tree(self) -> Iterator[str]:
        """Stream the tree line by line.

        Returns:
            Iterator yielding newline-terminated lines.

        Raises:
            RuntimeError: If the tree has already been streamed.
            RootUnreachableError: If the root cannot be listed.
            UnreadableEntryError: If an entry cannot be read and error_action is "raise".
        """
        if self._tree_complete:
            raise RuntimeError("Tree has already been streamed")

        for line in self._renderer.stream(self._source):
            self._line_count += 1
            yield line + "\n"

        self._tree_complete = True


def run(options: TrekOptions, output: Optional[TextIO] = None, color: Optional[bool] = None) -> int:
    """Render the tree described by ``options`` to ``output``.

    Args:
        options: The run configuration.
        output: Destination stream. Defaults to ``sys.stdout``.
        color: Force color on or off. By default it is resolved from ``options``,
            the terminal-ness of ``output`` and ``NO_COLOR``.

    Returns:
        The number of lines written.
    """
    if output is None:
        output = sys.stdout
    if color is None:
        color = resolve_color(options, output)

    trek = StreamingTrek.from_options(options, color=color)
    for line in trek.stream_tree():
        output.write(line)
    return trek.line_count
