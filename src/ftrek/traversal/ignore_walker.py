"""Filtered traversal source honoring hidden-file and gitignore rules.

The walker reads ignore rules as it descends: every visited directory may contribute
a ``.gitignore`` and an ``.ignore`` file, and a directory holding a ``.git``
directory contributes ``.git/info/exclude``. A git repository is not required for
any of these to apply. Optionally, ``.gitignore`` and ``.ignore`` files in the
ancestors of the root apply too.

Precedence follows git: rules from a deeper directory override rules from a
shallower one, ``.ignore`` overrides ``.gitignore`` in the same directory, and
within a single file the last matching pattern wins. An ignored directory is
pruned, so nothing below it can be re-included.
"""

import os
from pathlib import Path, PurePath
from typing import Iterator, List, Optional, Sequence

from ftrek.exceptions import RootUnreachableError
from ftrek.exclusion_rules.git_rules import GitIgnoreExclusionRules
from ftrek.traversal.base_source import BaseTraversalSource
from ftrek.traversal.entry import Entry, classify_stat, root_entry
from ftrek.traversal.error_action import ErrorAction, handle_unreadable
from ftrek.types import EntryKind, PathType

IGNORE_FILES = (".gitignore", ".ignore")
GIT_EXCLUDE_FILE = PurePath(".git", "info", "exclude")


class IgnoreWalker(BaseTraversalSource):
    """Walk a directory tree in pre-order, skipping hidden and ignored entries.

    Children of each directory are sorted by name. The root is yielded first and is
    never subject to filtering.

    Attributes:
        root (Entry): The root entry.
        hidden (bool): Whether entries whose name starts with a dot are skipped.
        parents (bool): Whether ignore files in ancestors of the root are read.
        error_action (ErrorAction): How to handle unreadable entries below the root.

    Example:
        >>> walker = IgnoreWalker("project")  # doctest: +SKIP
        >>> [entry.parts for entry in walker]  # doctest: +SKIP
        [(), ('kept.txt',), ('src',), ('src', 'main.py')]
    """

    def __init__(
        self,
        root: PathType,
        *,
        hidden: bool = True,
        parents: bool = True,
        error_action: ErrorAction = ErrorAction.IGNORE,
    ) -> None:
        """Initialize an IgnoreWalker.

        Args:
            root: Path of the directory to traverse, kept verbatim for display.
            hidden: Skip entries whose name starts with a dot. Defaults to True.
            parents: Apply ignore files found in ancestors of the root. Defaults to True.
            error_action: How to handle entries below the root that cannot be read.

        Raises:
            RootUnreachableError: If the root cannot be classified or is not a directory.
        """
        self.root = root_entry(root)
        self.hidden = hidden
        self.parents = parents
        self.error_action = error_action
        self._root_abs = Path(os.path.abspath(root))

    def __iter__(self) -> Iterator[Entry]:
        yield self.root
        rules = self._ancestor_rules() if self.parents else []
        yield from self._walk(self.root, rules)

    def _walk(self, directory: Entry, inherited: Sequence[GitIgnoreExclusionRules]) -> Iterator[Entry]:
        rules = list(inherited) + self._directory_rules(directory)

        try:
            with os.scandir(directory.path) as it:
                dir_entries = sorted(it, key=lambda d: d.name)
        except OSError as e:
            if directory.depth == 0:
                raise RootUnreachableError(directory.name, e.strerror or str(e)) from e
            handle_unreadable(self.error_action, directory.path, e)
            return

        kept = []
        for dir_entry in dir_entries:
            if self.hidden and dir_entry.name.startswith("."):
                continue
            try:
                kind = classify_stat(dir_entry.stat(follow_symlinks=False))
            except OSError as e:
                handle_unreadable(self.error_action, dir_entry.path, e)
                continue
            if self._is_ignored(rules, directory.parts + (dir_entry.name,), kind is EntryKind.DIRECTORY):
                continue
            kept.append((dir_entry.name, kind))

        last_index = len(kept) - 1
        for i, (name, kind) in enumerate(kept):
            child = directory.child(name, kind, is_last=i == last_index)
            yield child
            if child.is_dir:
                yield from self._walk(child, rules)

    def _is_ignored(self, rules: Sequence[GitIgnoreExclusionRules], parts: Sequence[str], is_dir: bool) -> bool:
        absolute = self._root_abs.joinpath(*parts)
        verdict: Optional[bool] = None
        for rule_set in rules:
            base_dir = rule_set.base_dir if rule_set.base_dir is not None else self._root_abs
            relative = absolute.relative_to(base_dir).as_posix()
            result = rule_set.match(relative, is_dir)
            if result is not None:
                verdict = result
        return verdict is True

    def _directory_rules(self, directory: Entry) -> List[GitIgnoreExclusionRules]:
        base_dir = self._root_abs.joinpath(*directory.parts)
        candidates = [base_dir / GIT_EXCLUDE_FILE] + [base_dir / name for name in IGNORE_FILES]
        return self._load(base_dir, candidates)

    def _ancestor_rules(self) -> List[GitIgnoreExclusionRules]:
        rules: List[GitIgnoreExclusionRules] = []
        for ancestor in reversed(self._root_abs.parents):
            root_relative = self._root_abs.relative_to(ancestor).as_posix()
            for rule_set in self._load(ancestor, [ancestor / name for name in IGNORE_FILES]):
                # Patterns matching the root would hide everything below it
                rule_set.discard_matching(root_relative, is_dir=True)
                if len(rule_set):
                    rules.append(rule_set)
        return rules

    def _load(self, base_dir: Path, candidates: Sequence[Path]) -> List[GitIgnoreExclusionRules]:
        loaded = []
        for candidate in candidates:
            try:
                if not candidate.is_file():
                    continue
                rule_set = GitIgnoreExclusionRules(candidate, base_dir=base_dir)
            except OSError as e:
                handle_unreadable(self.error_action, candidate, e)
                continue
            if len(rule_set):
                loaded.append(rule_set)
        return loaded
