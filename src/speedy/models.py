"""Core Speedy data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SearchKind(str, Enum):
    """What the caller is looking for."""

    FILE = "file"
    DIRECTORY = "folder"

    def accepts(self, kind: EntryKind) -> bool:
        if self is SearchKind.FILE:
            return kind is EntryKind.FILE
        return kind is EntryKind.DIRECTORY


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class SearchOutcome(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class SearchTarget:
    """Immutable description of a single search.

    ``name`` is stored case-folded so that every comparison against an entry
    name is a plain equality check. ``max_depth`` of ``None`` means unbounded.
    """

    name: str
    kind: SearchKind
    root: Path
    max_depth: int | None = None

    @classmethod
    def create(
        cls,
        name: str,
        kind: SearchKind,
        root: Path,
        max_depth: int | None = None,
    ) -> SearchTarget:
        return cls(name=name.casefold(), kind=kind, root=Path(root), max_depth=max_depth)

    def matches(self, entry: Entry) -> bool:
        return entry.name.casefold() == self.name and self.kind.accepts(entry.kind)


@dataclass(frozen=True, slots=True)
class Entry:
    """One filesystem node observed during a walk."""

    path: Path
    name: str
    kind: EntryKind
    depth: int


@dataclass(slots=True)
class SearchReport:
    """Outcome of a finished search run."""

    outcome: SearchOutcome
    target: SearchTarget
    elapsed: float
    path: Path | None = None
    scanned: int = 0
    errors: int = 0

    @property
    def found(self) -> bool:
        return self.outcome is SearchOutcome.FOUND

    @property
    def cancelled(self) -> bool:
        return self.outcome is SearchOutcome.CANCELLED

    def summary(self, display_name: str | None = None) -> str:
        name = display_name or self.target.name
        if self.outcome is SearchOutcome.FOUND:
            return f'Found "{name}" in {format_elapsed(self.elapsed)}'
        if self.outcome is SearchOutcome.CANCELLED:
            return "Search cancelled by user"
        return f'Could not find "{name}" after {format_elapsed(self.elapsed)}'


def format_elapsed(seconds: float) -> str:
    """Render a duration the way a human reads it (ms below one second)."""
    if seconds < 1:
        return f"{seconds * 1000:.2f}ms"
    return f"{seconds:.2f}s"
