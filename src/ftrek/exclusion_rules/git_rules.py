"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from ftrek.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Patterns are compiled by the pathspec library, so the full .gitignore syntax is
    supported: globs, directory-only patterns ending in ``/``, negation with ``!``,
    ``**`` and comments. Within one rule set the last matching pattern wins.

    A rule set belongs to a directory (``base_dir``). Paths passed to ``match`` and
    ``exclude`` are relative to that directory and use forward slashes, the same way
    git interprets the patterns of a ``.gitignore`` file relative to the directory
    containing it.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.
        base_dir (Optional[Path]): Directory the patterns are relative to, if known.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("app.log")
        True
        >>> rules.match("keep.log")
        False
        >>> rules.exclude("build", is_dir=True)
        True
        >>> rules.exclude("build")
        False
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        base_dir: Optional[PathType] = None,
    ):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.
            base_dir: Directory the patterns are relative to. Defaults to None.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])
        self.base_dir = Path(base_dir) if base_dir is not None else None

        if rules_files is not None:
            self.load_rules(rules_files)

    def __len__(self) -> int:
        return len(self._active_patterns())

    def _active_patterns(self) -> List[GitWildMatchPattern]:
        # Blank lines and comments compile to patterns with include=None
        return [pattern for pattern in self.spec.patterns if pattern.include is not None]

    def match(self, path: str, is_dir: bool = False) -> Optional[bool]:
        """Evaluate a path against the loaded patterns.

        Directories are matched with a trailing slash so that patterns such as
        ``build/`` apply to the directory itself and not to a file named ``build``.

        Args:
            path: Path relative to ``base_dir`` using forward slashes.
            is_dir: Whether the path names a directory.

        Returns:
            True when the last matching pattern ignores the path, False when it is a
            negated pattern, None when nothing matches.
        """
        candidate = self._candidate(path, is_dir)
        result: Optional[bool] = None
        for pattern in self._active_patterns():
            if pattern.regex.match(candidate) is not None:
                result = bool(pattern.include)
        return result

    def discard_matching(self, path: str, is_dir: bool = False) -> int:
        """Remove every pattern that matches ``path``.

        A pattern matching a directory also matches everything below it, so
        discarding the patterns that match a directory leaves only the rules that
        can tell its contents apart.

        Args:
            path: Path relative to ``base_dir`` using forward slashes.
            is_dir: Whether the path names a directory.

        Returns:
            The number of patterns removed.
        """
        candidate = self._candidate(path, is_dir)
        kept = [pattern for pattern in self._active_patterns() if pattern.regex.match(candidate) is None]
        removed = len(self) - len(kept)
        self.spec.patterns = kept
        return removed

    @staticmethod
    def _candidate(path: str, is_dir: bool) -> str:
        return path.rstrip("/") + "/" if is_dir else path

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Patterns are appended in file order, so later files can override earlier
        ones through negation.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            OSError: If a rules file exists but cannot be read.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8", errors="replace") as f:
                gitignore_content = f.read().splitlines()

            new_patterns = PathSpec.from_lines(GitWildMatchPattern, gitignore_content).patterns

            # Ensure patterns is a list that supports extend
            if not hasattr(self.spec.patterns, "extend"):
                self.spec.patterns = list(self.spec.patterns)

            self.spec.patterns.extend(new_patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single .gitignore pattern (e.g., "*.pyc", "node_modules/", "!important.txt").
        """
        new_pattern = GitWildMatchPattern(rule)

        # Ensure patterns is a list that supports append
        if not hasattr(self.spec.patterns, "append"):
            self.spec.patterns = list(self.spec.patterns)

        self.spec.patterns.append(new_pattern)
