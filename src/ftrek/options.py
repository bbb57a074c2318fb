"""Run configuration assembled from the command line."""

import argparse
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ftrek.rendering.styling import color_enabled
from ftrek.traversal.error_action import ErrorAction

COLOR_CHOICES = ("auto", "always", "never")

# CLI permission actions mapped to the traversal error policy
PERMISSION_ACTIONS = {
    "ignore": ErrorAction.IGNORE,
    "warn": ErrorAction.WARN,
    "fail": ErrorAction.RAISE,
}


@dataclass
class TrekOptions:
    """Options for a single tree render.

    Attributes:
        root (str): Directory to render, displayed verbatim. Defaults to ".".
        gitignore (bool): Skip hidden and gitignored entries. Defaults to False.
        color (str): One of "auto", "always" or "never". Defaults to "auto".
        error_action (ErrorAction): Handling of unreadable entries below the root.
    """

    root: str = "."
    gitignore: bool = False
    color: str = "auto"
    error_action: ErrorAction = ErrorAction.IGNORE

    def __post_init__(self) -> None:
        if self.color not in COLOR_CHOICES:
            raise ValueError(f"Invalid color mode: {self.color}. Must be one of: {', '.join(COLOR_CHOICES)}")
        if isinstance(self.error_action, str) and not isinstance(self.error_action, ErrorAction):
            try:
                self.error_action = ErrorAction(self.error_action.lower())
            except ValueError:
                raise ValueError(
                    f"Invalid error_action: {self.error_action}. Must be one of: 'ignore', 'warn', 'raise'"
                )

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "TrekOptions":
        """Build options from arguments parsed by ``ftrek.cli.argparser``."""
        return cls(
            root=args.directory,
            gitignore=args.gitignore,
            color=args.color,
            error_action=PERMISSION_ACTIONS[args.permission_action],
        )


def resolve_color(options: TrekOptions, stream: Any, environ: Optional[Mapping[str, str]] = None) -> bool:
    """Decide once whether this run writes colored output.

    "always" and "never" are honored as given; "auto" colors only a terminal and only
    when ``NO_COLOR`` is unset.
    """
    if options.color == "always":
        return True
    if options.color == "never":
        return False
    return color_enabled(stream, environ)
