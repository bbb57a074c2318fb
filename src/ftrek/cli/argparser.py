"""Command-line argument parsing for ftrek.

This module defines the command-line interface for ftrek,
handling argument parsing and validation.
"""

import argparse
from typing import Iterable, Optional

from ftrek import __version__
from ftrek.options import COLOR_CHOICES, PERMISSION_ACTIONS


class UsageHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Help formatter that prints ``Usage:`` instead of argparse's lowercase ``usage:``."""

    def add_usage(
        self,
        usage: Optional[str],
        actions: Iterable[argparse.Action],
        groups: Iterable[argparse._MutuallyExclusiveGroup],
        prefix: Optional[str] = None,
    ) -> None:
        if prefix is None:
            prefix = "Usage: "
        super().add_usage(usage, actions, groups, prefix)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with ftrek's options.
    """
    description = """
    ftrek: print a directory as a tree.

    Entries are listed depth-first below the root, one per line, joined by
    box-drawing characters. Directories end with a slash. When writing to a
    terminal, directories are blue, symlinks cyan and executables green; set
    NO_COLOR or use --color never to disable colors.
    """

    epilog = """
    Examples:
      # Print the current directory
      ftrek

      # Print a specific directory
      ftrek /path/to/project

      # Skip hidden files and anything matched by .gitignore or .ignore files
      ftrek --gitignore /path/to/project

      # Report entries that cannot be read instead of skipping them silently
      ftrek -P warn /path/to/project

      # Stop at the first entry that cannot be read
      ftrek -P fail /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="ftrek",
        description=description,
        epilog=epilog,
        formatter_class=UsageHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"ftrek {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        metavar="DIRECTORY",
        nargs="?",
        default=".",
        help="The directory to print (default: the current directory).",
    )
    parser.add_argument(
        "--gitignore",
        action="store_true",
        help="Skip hidden entries and entries ignored by .gitignore, .ignore or .git/info/exclude rules.",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        default="auto",
        help="When to color entry names (default: auto, meaning only on a terminal without NO_COLOR).",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=list(PERMISSION_ACTIONS),
        default="ignore",
        help="How to handle entries below the root that cannot be read (default: ignore).",
    )

    return parser
