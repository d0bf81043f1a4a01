"""Parallel "find first match" over a lazily produced entry sequence."""

from __future__ import annotations

import logging
import queue
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Iterable

from speedy.errors import ThreadPoolError
from speedy.models import Entry, SearchTarget
from speedy.search.channels import ResultChannel
from speedy.search.flags import CancellationToken, FoundState

LOGGER = logging.getLogger(__name__)

_BACKLOG_PER_WORKER = 64


def parallel_search(
    entries: Iterable[Entry],
    target: SearchTarget,
    *,
    workers: int,
    cancel: CancellationToken,
    results: ResultChannel,
    stop_after_match: bool = False,
    found: FoundState | None = None,
) -> bool:
    """Evaluate ``entries`` on ``workers`` threads and report whether a match was published.

    The calling thread drives ``entries`` and hands each one to whichever
    worker is free. Production stops as soon as the search is cancelled or
    a match has been published. With ``stop_after_match`` the workers also
    drop entries they already claimed; otherwise those are still evaluated,
    and any late match loses the race on ``found`` and is discarded.

    Which of several matching entries wins depends on thread scheduling and
    is not the first one in tree order. The winning path is delivered
    through ``results``; at most one path is ever offered.
    """
    found = found if found is not None else FoundState()
    try:
        pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="speedy-worker")
    except ValueError as exc:
        raise ThreadPoolError(f"Cannot start {workers} worker threads: {exc}") from exc

    work: queue.Queue[Entry | None] = queue.Queue(maxsize=workers * _BACKLOG_PER_WORKER)
    futures: list[Future[bool]] = []
    with pool:
        try:
            for _ in range(workers):
                try:
                    futures.append(
                        pool.submit(_consume, work, target, cancel, found, results, stop_after_match)
                    )
                except RuntimeError as exc:
                    raise ThreadPoolError(f"Cannot start worker thread {len(futures) + 1}: {exc}") from exc
            for entry in entries:
                if cancel.is_set() or found.is_set():
                    break
                work.put(entry)
        finally:
            # One sentinel per requested worker: a submit that failed while
            # starting its thread may still have queued its job on the pool.
            for _ in range(workers):
                work.put(None)
        winners = [future.result() for future in futures]

    return any(winners)


def _consume(
    work: queue.Queue[Entry | None],
    target: SearchTarget,
    cancel: CancellationToken,
    found: FoundState,
    results: ResultChannel,
    stop_after_match: bool,
) -> bool:
    won = False
    while True:
        entry = work.get()
        if entry is None:
            return won
        if cancel.is_set():
            continue
        if stop_after_match and found.is_set():
            continue
        if not target.matches(entry):
            continue
        if found.try_set():
            results.offer(entry.path)
            won = True
            LOGGER.debug("Published match %s", entry.path)
        else:
            LOGGER.debug("Discarded late match %s", entry.path)
