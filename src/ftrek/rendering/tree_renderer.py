"""Tree rendering for both traversal sources.

Two algorithms produce the same line format:

- Hierarchical mode recurses over a ``DirectorySource``, listing each directory as
  it is entered. Every entry knows whether it is the last of its siblings, so the
  connectors are exact.
- Flattened mode consumes any pre-order stream of entries and rebuilds ancestry by
  comparing each entry's path components with those of the previously rendered
  entry. When the stream does not say whether an entry is the last sibling, the
  entry is assumed to be last if it is the deepest component of its own path. A
  sibling arriving later in the stream cannot revise a connector that was already
  written, so such streams may show ``└──`` where ``├──`` was due.

In both modes, an entry at depth ``d > 0`` is preceded by ``d - 1`` filler segments
and one connector, and directories get a trailing ``/``. The root line is the
caller-supplied root label followed by ``/``.
"""

from typing import Iterable, Iterator, List, Protocol

from ftrek.rendering.prefix_stack import PrefixStack, connector
from ftrek.rendering.styling import Style
from ftrek.traversal.base_source import BaseTraversalSource
from ftrek.traversal.directory_source import DirectorySource
from ftrek.traversal.entry import Entry
from ftrek.types import EntryKind


class TextSink(Protocol):
    def write(self, text: str) -> object: ...


def display_text(text: str) -> str:
    """Return ``text`` with undecodable file name bytes shown as U+FFFD.

    File names that are not valid UTF-8 reach Python with surrogate escapes, which
    cannot be written as UTF-8. Each such byte is replaced, so one odd name never
    stops the tree from being written.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "replace").decode("utf-8")
    return raw.decode("utf-8", "replace")


class TreeRenderer:
    """Convert traversal entries into prefixed, indented text lines.

    Attributes:
        root_label (str): Text printed for the root, before the trailing slash.
        style (Style): Styling applied to entry names.

    Example:
        >>> renderer = TreeRenderer("src", Style(color=False))  # doctest: +SKIP
        >>> for line in renderer.stream(DirectorySource("src")):  # doctest: +SKIP
        ...     print(line)
        src/
        ├── main.py
        └── utils/
            └── helpers.py
    """

    def __init__(self, root_label: str, style: Style) -> None:
        self.root_label = root_label
        self.style = style

    def stream(self, source: BaseTraversalSource) -> Iterator[str]:
        """Render ``source`` with the algorithm that suits it.

        A ``DirectorySource`` is rendered hierarchically; any other source is
        rendered from its flattened entry stream.

        Yields:
            One line per entry, without a trailing newline.
        """
        if isinstance(source, DirectorySource):
            return self.stream_hierarchy(source)
        return self.stream_flattened(source)

    def render(self, source: BaseTraversalSource, output: TextSink) -> int:
        """Write the tree for ``source`` to ``output``, one newline-terminated line per entry.

        Args:
            source: The traversal source.
            output: Any object with a ``write(str)`` method.

        Returns:
            The number of lines written.

        Raises:
            OSError: If the root cannot be listed or ``output`` cannot be written.
        """
        count = 0
        for line in self.stream(source):
            output.write(line + "\n")
            count += 1
        return count

    def stream_hierarchy(self, source: DirectorySource) -> Iterator[str]:
        """Render by recursing over directory listings."""
        stack = PrefixStack()
        yield self._root_line()
        yield from self._visit_children(source, source.root, stack)

    def _visit_children(self, source: DirectorySource, directory: Entry, stack: PrefixStack) -> Iterator[str]:
        for child in source.children(directory):
            is_last = True if child.is_last is None else child.is_last
            with stack.descend(is_last):
                yield self._prefix(stack, len(stack) - 1, is_last) + self._label(child.name, child.kind)
                if child.is_dir:
                    yield from self._visit_children(source, child, stack)

    def stream_flattened(self, entries: Iterable[Entry]) -> Iterator[str]:
        """Render a pre-order entry stream by diffing path components."""
        stack = PrefixStack()
        rendered: List[str] = []

        for entry in entries:
            depth = entry.depth
            if depth == 0:
                yield self._root_line()
                continue

            # Leave the subtrees that are finished
            stack.truncate(depth - 1)
            del rendered[depth - 1 :]

            for i, part in enumerate(entry.parts):
                if i < len(rendered) and rendered[i] == part:
                    continue

                is_leaf = i == depth - 1
                if is_leaf and entry.is_last is not None:
                    is_last = entry.is_last
                else:
                    is_last = is_leaf
                kind = entry.kind if is_leaf else EntryKind.DIRECTORY

                yield self._prefix(stack, i, is_last) + self._label(part, kind)

                stack.truncate(i)
                stack.push(is_last)
                del rendered[i:]
                rendered.append(part)
                break

    def _root_line(self) -> str:
        return self.style.entry(f"{display_text(self.root_label)}/", EntryKind.DIRECTORY)

    def _prefix(self, stack: PrefixStack, fillers: int, is_last: bool) -> str:
        segments = [self.style.branch(segment) for segment in stack.fillers(fillers)]
        segments.append(self.style.branch(connector(is_last)))
        return "".join(segments)

    def _label(self, name: str, kind: EntryKind) -> str:
        name = display_text(name)
        text = f"{name}/" if kind is EntryKind.DIRECTORY else name
        return self.style.entry(text, kind)
