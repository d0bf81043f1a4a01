"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from speedy.errors import ConfigurationError

PROGRESS_EVERY = 500
TICK_INTERVAL = 0.1


def _default_workers() -> int:
    return os.cpu_count() or 1


@dataclass(slots=True)
class AppConfig:
    root: Path | None = None
    global_search: bool = False
    max_depth: int | None = None
    workers: int = field(default_factory=_default_workers)
    stop_after_match: bool = False
    verbose: bool = False
    quiet: bool = False
    notify: bool = False
    progress_every: int = PROGRESS_EVERY
    tick_interval: float = TICK_INTERVAL
    progress_capacity: int = 64

    def resolve_root(self, base_dir: Path | None = None) -> Path:
        """Return the directory a search should start from.

        An explicit root wins over a global search, which starts at the
        filesystem anchor of ``base_dir`` (``/`` or a drive such as ``C:\\``).
        """
        base = base_dir if base_dir is not None else Path.cwd()
        if self.root is not None:
            root = Path(self.root).expanduser()
            if root.is_absolute():
                return root
            return base / root
        if self.global_search:
            return Path(base.resolve().anchor)
        return base

    def validate(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ConfigurationError(f"Depth must be zero or greater, got {self.max_depth}")
        if self.workers < 1:
            raise ConfigurationError(f"Thread count must be at least 1, got {self.workers}")
        if self.progress_every < 1:
            raise ConfigurationError("Progress interval must be at least 1 entry")
        if self.tick_interval <= 0:
            raise ConfigurationError("Tick interval must be positive")
        if self.progress_capacity < 1:
            raise ConfigurationError("Progress channel capacity must be at least 1")


def check_root(root: Path) -> None:
    """Fail before any traversal if ``root`` cannot be searched."""
    if not root.exists():
        raise ConfigurationError(f"Path does not exist: {root}")
    if not root.is_dir():
        raise ConfigurationError(f"Path is not a directory: {root}")
    if not os.access(root, os.R_OK | os.X_OK):
        raise ConfigurationError(f"Path is not readable: {root}")
