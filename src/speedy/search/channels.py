"""Hand-off channels between search workers and the caller."""

from __future__ import annotations

import queue
from pathlib import Path


class ProgressChannel:
    """Bounded, lossy feed of visited-entry counts.

    Producers never block: when the channel is full the sample is dropped.
    Samples carry no correctness meaning.
    """

    def __init__(self, capacity: int = 64) -> None:
        self._queue: queue.Queue[int] = queue.Queue(maxsize=capacity)
        self.dropped = 0

    def publish(self, count: int) -> bool:
        try:
            self._queue.put_nowait(count)
        except queue.Full:
            self.dropped += 1
            return False
        return True

    def poll(self) -> int | None:
        """Return the newest pending sample, or None when nothing arrived."""
        latest = None
        while True:
            try:
                latest = self._queue.get_nowait()
            except queue.Empty:
                return latest


class ResultChannel:
    """Single-slot hand-off of the winning path."""

    def __init__(self) -> None:
        self._slot: queue.Queue[Path] = queue.Queue(maxsize=1)

    def offer(self, path: Path) -> bool:
        """Try to fill the slot; never blocks, returns False if already filled."""
        try:
            self._slot.put_nowait(path)
        except queue.Full:
            return False
        return True

    def take(self) -> Path | None:
        try:
            return self._slot.get_nowait()
        except queue.Empty:
            return None
