from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from ftrek.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Implementations decide whether a path, given relative to the directory the rules
    belong to, is excluded from the tree. Rules can express three outcomes through
    ``match``: excluded, explicitly re-included, or no opinion. The last outcome lets
    a walker layer several rule sets (for example one ``.gitignore`` per directory)
    and let the most specific rule set that has an opinion win.

    Example:
        >>> from ftrek.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('test.pyc')
        True
        >>> rules.match('test.py') is None
        True
    """

    @abstractmethod
    def match(self, path: str, is_dir: bool = False) -> Optional[bool]:
        """
        Evaluate a path against the rules.

        Args:
            path (str): Path relative to the directory the rules apply to, using
                forward slashes.
            is_dir (bool): Whether the path names a directory. Directory-only patterns
                (ending in ``/``) only match when this is True.

        Returns:
            Optional[bool]: True if the path is excluded, False if a rule explicitly
                re-includes it, None if no rule applies.
        """
        pass

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path (str): The file or directory path to check, relative to the directory
                the rules apply to.
            is_dir (bool): Whether the path names a directory.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        return self.match(path, is_dir) is True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types that don't support file operations use this default implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
