"""Shared fixtures for building small directory trees."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest


def build_tree(root: Path, layout: Iterable[str]) -> Path:
    """Create files and directories under ``root``; names ending in "/" are directories."""
    for item in layout:
        target = root / item
        if item.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(item)
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    def _make(*layout: str) -> Path:
        root = tmp_path / "t"
        root.mkdir(exist_ok=True)
        return build_tree(root, layout)

    return _make
