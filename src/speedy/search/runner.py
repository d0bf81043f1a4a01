"""Background search task with a foreground progress loop."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from speedy.config import AppConfig
from speedy.models import SearchOutcome, SearchReport, SearchTarget
from speedy.search.channels import ProgressChannel, ResultChannel
from speedy.search.coordinator import parallel_search
from speedy.search.flags import CancellationToken, FoundState
from speedy.search.walker import DirectoryWalker

LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


class SearchTask:
    """Runs one search on a background thread.

    The caller starts the task, then blocks in :meth:`wait`, which polls the
    progress channel every ``tick_interval`` seconds until the search thread
    exits and finally assembles a :class:`SearchReport`.
    """

    def __init__(
        self,
        target: SearchTarget,
        config: AppConfig,
        *,
        cancel: CancellationToken | None = None,
    ) -> None:
        self.target = target
        self.config = config
        self.cancel = cancel if cancel is not None else CancellationToken()
        self.found_state = FoundState()
        self.progress = ProgressChannel(config.progress_capacity)
        self.results = ResultChannel()
        self.walker = DirectoryWalker(
            target.root,
            max_depth=target.max_depth,
            progress=self.progress,
            progress_every=config.progress_every,
            verbose=config.verbose,
        )
        self._thread = threading.Thread(target=self._run, name="speedy-search", daemon=True)
        self._found = False
        self._error: Optional[Exception] = None
        self._started_at: float | None = None

    def start(self) -> None:
        LOGGER.debug(
            "Searching %s %r under %s with %d workers",
            self.target.kind.value,
            self.target.name,
            self.target.root,
            self.config.workers,
        )
        self._started_at = time.perf_counter()
        self._thread.start()

    def is_finished(self) -> bool:
        return self._started_at is not None and not self._thread.is_alive()

    def _run(self) -> None:
        try:
            self._found = parallel_search(
                self.walker,
                self.target,
                workers=self.config.workers,
                cancel=self.cancel,
                results=self.results,
                stop_after_match=self.config.stop_after_match,
                found=self.found_state,
            )
        except Exception as exc:
            self._error = exc

    def wait(self, on_progress: ProgressCallback | None = None) -> SearchReport:
        if self._started_at is None:
            raise RuntimeError("SearchTask.wait() called before start()")

        while self._thread.is_alive():
            sample = self.progress.poll()
            if sample is not None and on_progress is not None:
                on_progress(sample)
            self._thread.join(self.config.tick_interval)

        elapsed = time.perf_counter() - self._started_at
        if self._error is not None:
            raise self._error

        path = self.results.take() if self._found else None
        if path is not None:
            outcome = SearchOutcome.FOUND
        elif self.cancel.is_set():
            outcome = SearchOutcome.CANCELLED
        else:
            outcome = SearchOutcome.NOT_FOUND

        LOGGER.debug(
            "Search finished: %s after %d entries (%d errors)",
            outcome.value,
            self.walker.scanned,
            self.walker.errors,
        )
        return SearchReport(
            outcome=outcome,
            target=self.target,
            elapsed=elapsed,
            path=path,
            scanned=self.walker.scanned,
            errors=self.walker.errors,
        )


def run_search(
    target: SearchTarget,
    config: AppConfig,
    *,
    cancel: CancellationToken | None = None,
    on_progress: ProgressCallback | None = None,
) -> SearchReport:
    """Start a search and block until it finishes."""
    task = SearchTask(target, config, cancel=cancel)
    task.start()
    return task.wait(on_progress)
