"""Command-line interface for ftrek.

This module provides the ``ftrek`` command. It parses the command line, decides
once whether output is colored, and streams the tree to standard output.

Exit Codes:
    0: Successful completion
    1: Error during execution (for example an unreadable root)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Print the current directory
    $ ftrek

    # Skip gitignored entries
    $ ftrek --gitignore /path/to/project
"""

import logging
import sys
from typing import List, Optional

from ftrek.cli.argparser import create_parser
from ftrek.cli.safe_writer import SafeWriter
from ftrek.cli.signal_handler import setup_signal_handling, signal_handler
from ftrek.options import TrekOptions, resolve_color
from ftrek.trek import StreamingTrek

LOGGER_NAME = "ftrek"
WARNING_FORMAT = "Warning: %(message)s"


def configure_logging() -> None:
    """Send warnings from the ``ftrek`` loggers to standard error.

    Replaces any handler installed by an earlier call, so repeated calls in one
    process always write to the current ``sys.stderr``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(WARNING_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the ftrek command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.
    """
    setup_signal_handling()

    # argparse exits with status 2 on syntax errors and 0 for --help/--version
    args = create_parser().parse_args(argv)

    try:
        configure_logging()
        options = TrekOptions.from_namespace(args)

        with SafeWriter(sys.stdout.fileno()) as writer:
            color = resolve_color(options, writer)
            trek = StreamingTrek.from_options(options, color=color)
            try:
                writer.write_lines(trek.stream_tree())
            except BrokenPipeError:
                pass

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
