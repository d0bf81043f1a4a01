"""Utility helpers for deciding what a walk should look at."""

from __future__ import annotations

import errno
import os
from pathlib import Path

# Noisy or system directories whose subtrees are never worth scanning.
SKIP_DIRECTORY_NAMES = frozenset(
    {
        "$recycle.bin",
        ".trash",
        ".trashes",
        "system volume information",
        "windows",
        "program files",
        "program files (x86)",
        "appdata",
        "temp",
        "tmp",
        "node_modules",
        ".git",
        ".hg",
        ".svn",
    }
)

EXPECTED_ERRNOS = frozenset({errno.EACCES, errno.EPERM, errno.ENOENT, errno.EINTR})


def should_skip_directory(path: str | os.PathLike[str]) -> bool:
    """Return True if the whole subtree under ``path`` must be pruned."""
    name = Path(path).name
    if not name:
        return False
    return name.casefold() in SKIP_DIRECTORY_NAMES


def is_expected_access_error(exc: OSError) -> bool:
    """Permission denied, vanished entries and interrupted calls are routine."""
    if isinstance(exc, (PermissionError, FileNotFoundError, InterruptedError)):
        return True
    return exc.errno in EXPECTED_ERRNOS
