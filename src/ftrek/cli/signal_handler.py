"""Signal handling for the ftrek CLI.

A tree can be long, and its output is often piped into ``head`` or interrupted
with Ctrl+C. The handlers here only record that a signal arrived; the writer
checks the flags before each write and stops cleanly.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Dict, Optional

# SIGPIPE does not exist on Windows
HAS_SIGPIPE = hasattr(signal, "SIGPIPE")


class SignalHandler:
    """Records SIGPIPE and SIGINT so the render loop can stop between lines.

    Attributes:
        sigpipe_received: Set once the reader of standard output has gone away.
        sigint_received: Set once the user interrupted the run.
        original_handlers: Handlers in place before ``install`` was called, by signal number.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_handlers: Dict[int, Any] = {}

    @property
    def interrupted(self) -> bool:
        """Whether either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def install(self) -> None:
        """Route SIGPIPE (where available) and SIGINT to this handler."""
        if HAS_SIGPIPE:
            self.original_handlers[signal.SIGPIPE] = signal.getsignal(signal.SIGPIPE)
            signal.signal(signal.SIGPIPE, self.handle_sigpipe)
        self.original_handlers[signal.SIGINT] = signal.getsignal(signal.SIGINT)
        signal.signal(signal.SIGINT, self.handle_sigint)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signum, self.original_handlers.get(signum, signal.SIG_DFL))

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        # A second Ctrl+C falls through to the original handler
        self.sigint_received.set()
        signal.signal(signum, self.original_handlers.get(signum, signal.default_int_handler))

    def exit_code(self) -> Optional[int]:
        """Conventional exit status for the received signal, or None."""
        if self.sigpipe_received.is_set():
            return 141
        if self.sigint_received.is_set():
            return 130
        return None


# Process-wide instance shared by the writer and the entry point
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Configure signal handlers for SIGPIPE and SIGINT."""
    signal_handler.install()


def cleanup() -> None:
    """Silence standard output after an interruption.

    Once the reader of a pipe has gone away, any final flush of ``sys.stdout`` at
    interpreter shutdown would fail noisily, so standard output is pointed at the
    null device instead.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
