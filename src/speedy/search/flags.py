"""Shared single-bit flags observed by every search worker."""

from __future__ import annotations

import logging
import signal
import threading
from typing import Any, Callable

LOGGER = logging.getLogger(__name__)


class CancellationToken:
    """Process-wide "stop now" flag.

    Setting it is a single attribute store, which keeps it safe to call from
    a signal handler. It is never reset during a run.
    """

    __slots__ = ("_cancelled",)

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    def is_set(self) -> bool:
        return self._cancelled


class FoundState:
    """Flag that exactly one caller can flip from unset to set."""

    __slots__ = ("_claim", "_found")

    def __init__(self) -> None:
        self._claim = threading.Lock()
        self._found = False

    def try_set(self) -> bool:
        """Atomic compare-and-set; returns True only for the single winner."""
        if not self._claim.acquire(blocking=False):
            return False
        self._found = True
        return True

    def is_set(self) -> bool:
        return self._found


def install_interrupt_handler(token: CancellationToken) -> Callable[[], None]:
    """Route SIGINT to ``token.cancel`` and return a function restoring the old handler.

    Must be called from the main thread.
    """

    def _handler(signum: int, frame: Any) -> None:
        token.cancel()

    previous = signal.signal(signal.SIGINT, _handler)
    LOGGER.debug("Installed interrupt handler for cancellation")

    def restore() -> None:
        signal.signal(signal.SIGINT, previous)

    return restore
