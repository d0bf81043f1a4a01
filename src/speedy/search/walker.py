"""Depth-bounded, pruning directory walker."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterator

from speedy.config import PROGRESS_EVERY
from speedy.models import Entry, EntryKind
from speedy.search.channels import ProgressChannel
from speedy.utils.files import is_expected_access_error, should_skip_directory

LOGGER = logging.getLogger(__name__)
# Expected access errors. The CLI keeps this logger at INFO, even with --verbose.
ACCESS_LOGGER = logging.getLogger(f"{__name__}.access")


class DirectoryWalker:
    """Lazily yield every entry beneath ``root``.

    Symbolic links are reported as ``EntryKind.OTHER`` and never followed.
    Children of ``root`` are at depth 0; with ``max_depth=0`` no
    subdirectory is listed, with ``None`` the descent is unbounded.
    Directories accepted by ``skip`` are neither yielded nor counted nor
    listed.

    A walker can only be iterated once. ``scanned`` and ``errors`` hold the
    running totals, including entries that could not be accessed.
    """

    def __init__(
        self,
        root: Path,
        *,
        max_depth: int | None = None,
        progress: ProgressChannel | None = None,
        progress_every: int = PROGRESS_EVERY,
        verbose: bool = False,
        skip: Callable[[str], bool] = should_skip_directory,
    ) -> None:
        self.root = Path(root).absolute()
        self.max_depth = max_depth
        self.progress = progress
        self.progress_every = progress_every
        self.verbose = verbose
        self.skip = skip
        self.scanned = 0
        self.errors = 0
        self._started = False

    def __iter__(self) -> Iterator[Entry]:
        if self._started:
            raise RuntimeError("DirectoryWalker cannot be restarted")
        self._started = True
        return self._walk()

    def _walk(self) -> Iterator[Entry]:
        pending: list[tuple[str, int]] = [(str(self.root), 0)]
        while pending:
            directory, depth = pending.pop()
            try:
                with os.scandir(directory) as it:
                    children = list(it)
            except OSError as exc:
                self._record_error(directory, exc)
                continue

            subdirs: list[tuple[str, int]] = []
            for child in children:
                try:
                    kind = _classify(child)
                except OSError as exc:
                    self._record_error(child.path, exc)
                    continue

                if kind is EntryKind.DIRECTORY and self.skip(child.path):
                    LOGGER.debug("Pruned %s", child.path)
                    continue

                self._tick()
                yield Entry(path=Path(child.path), name=child.name, kind=kind, depth=depth)

                if kind is EntryKind.DIRECTORY and (self.max_depth is None or depth < self.max_depth):
                    subdirs.append((child.path, depth + 1))

            # Reversed so the first subdirectory listed is the next one popped.
            pending.extend(reversed(subdirs))

    def _tick(self) -> None:
        self.scanned += 1
        if self.progress is not None and self.scanned % self.progress_every == 0:
            self.progress.publish(self.scanned)

    def _record_error(self, path: str, exc: OSError) -> None:
        self.errors += 1
        self._tick()
        if is_expected_access_error(exc):
            ACCESS_LOGGER.debug("Skipped %s: %s", path, exc)
        elif self.verbose:
            LOGGER.warning("Could not access directory: %s", exc)
        else:
            LOGGER.debug("Could not access %s: %s", path, exc)


def _classify(child: os.DirEntry[str]) -> EntryKind:
    if child.is_symlink():
        return EntryKind.OTHER
    if child.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if child.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER
