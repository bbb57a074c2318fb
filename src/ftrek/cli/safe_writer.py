"""Signal-aware output for the ftrek CLI.

Tree lines are written straight to a file descriptor so that a closed pipe is
detected on the write that hits it, rather than on a later buffer flush.
"""

import errno
import os
import types
from typing import Iterable, Optional, Type

from ftrek.cli.signal_handler import signal_handler


class SafeWriter:
    """Write UTF-8 text to a file descriptor, stopping cleanly on broken pipes.

    Attributes:
        fd (int): The file descriptor written to. It is never closed by this class.
        lines_written (int): Number of lines written through ``write_lines``.
    """

    def __init__(self, fd: int) -> None:
        if not isinstance(fd, int):
            raise TypeError(f"Expected a file descriptor, got {type(fd).__name__}")
        self.fd = fd
        self.lines_written = 0
        self._closed = False

    def isatty(self) -> bool:
        return os.isatty(self.fd)

    def write(self, data: str) -> None:
        """Write ``data`` in full.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is closed.
            OSError: If any other I/O error occurs.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        payload = data.encode("utf-8")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def write_lines(self, lines: Iterable[str]) -> int:
        """Write each line as it is produced and return how many were written."""
        for line in lines:
            self.write(line)
            self.lines_written += 1
        return self.lines_written

    def close(self) -> None:
        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
