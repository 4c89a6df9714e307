"""Cooperative cancellation for batch scans driven from the terminal."""

import signal
import threading
from types import FrameType, TracebackType
from typing import Any, Optional


class InterruptCancellation:
    """
    Turns Ctrl-C into a polled cancellation flag while active.

    Use as a context manager and pass the instance as the scan's
    ``is_cancelled`` predicate. Outside the main thread no handler is
    installed and the flag only changes through cancel().
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._previous: Any = None
        self._installed = False

    def __call__(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def _handle(self, signum: int, frame: Optional[FrameType]) -> None:
        self.cancel()

    def __enter__(self) -> "InterruptCancellation":
        if threading.current_thread() is threading.main_thread():
            self._previous = signal.signal(signal.SIGINT, self._handle)
            self._installed = True
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._installed:
            signal.signal(signal.SIGINT, self._previous)
            self._installed = False
