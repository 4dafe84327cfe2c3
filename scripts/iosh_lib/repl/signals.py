"""
Keyboard interrupt handling for the REPL host.

The SIGINT handler only records that an interrupt happened; the REPL
loop applies the mode reset between input reads.
"""

import signal
import threading


class InterruptFlag:
    """Records keyboard interrupts for the REPL loop to act on."""

    def __init__(self):
        self._event = threading.Event()
        self._previous_handler = None

    def set(self) -> None:
        self._event.set()

    def consume(self) -> bool:
        """Return True if an interrupt was recorded, clearing it."""
        if self._event.is_set():
            self._event.clear()
            return True
        return False

    def _handle_sigint(self, signum, frame) -> None:
        self.set()

    def install(self) -> None:
        """Route SIGINT to this flag while commands execute."""
        self._previous_handler = signal.signal(signal.SIGINT, self._handle_sigint)

    def restore(self) -> None:
        if self._previous_handler is not None:
            signal.signal(signal.SIGINT, self._previous_handler)
            self._previous_handler = None
