"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from speedy.config import PROGRESS_EVERY, TICK_INTERVAL, AppConfig, check_root
from speedy.errors import ConfigurationError


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        with patch("speedy.config.os.cpu_count", return_value=6):
            config = AppConfig()

        assert config.root is None
        assert config.global_search is False
        assert config.max_depth is None
        assert config.workers == 6
        assert config.stop_after_match is False
        assert config.progress_every == PROGRESS_EVERY == 500
        assert config.tick_interval == TICK_INTERVAL

    def test_default_workers_without_cpu_count(self) -> None:
        """Falls back to one worker when the core count is unknown."""
        with patch("speedy.config.os.cpu_count", return_value=None):
            config = AppConfig()

        assert config.workers == 1

    def test_resolve_root_absolute(self) -> None:
        """Should return absolute root as-is."""
        config = AppConfig(root=Path("/absolute/path"))

        assert config.resolve_root(Path("/base")) == Path("/absolute/path")

    def test_resolve_root_relative_with_base(self) -> None:
        """Should resolve relative root against base_dir."""
        config = AppConfig(root=Path("relative/dir"))

        assert config.resolve_root(Path("/base")) == Path("/base/relative/dir")

    def test_resolve_root_default_is_base(self) -> None:
        """Without a root, the search starts at base_dir."""
        assert AppConfig().resolve_root(Path("/base")) == Path("/base")

    def test_resolve_root_global(self, tmp_path: Path) -> None:
        """A global search starts at the filesystem anchor."""
        config = AppConfig(global_search=True)

        assert config.resolve_root(tmp_path) == Path(tmp_path.resolve().anchor)

    def test_explicit_root_wins_over_global(self) -> None:
        """--path takes precedence over --global."""
        config = AppConfig(root=Path("/somewhere"), global_search=True)

        assert config.resolve_root(Path("/base")) == Path("/somewhere")

    def test_validate_accepts_defaults(self) -> None:
        """The default configuration is valid."""
        AppConfig().validate()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"max_depth": -1},
            {"workers": 0},
            {"progress_every": 0},
            {"tick_interval": 0},
            {"progress_capacity": 0},
        ],
    )
    def test_validate_rejects_bad_values(self, overrides: dict) -> None:
        """Bad numeric settings are configuration errors."""
        config = AppConfig(**overrides)

        with pytest.raises(ConfigurationError):
            config.validate()

    def test_depth_zero_is_valid(self) -> None:
        """A depth of zero is allowed."""
        AppConfig(max_depth=0).validate()


class TestCheckRoot:
    """Test check_root."""

    def test_existing_directory(self, tmp_path: Path) -> None:
        """An existing readable directory passes."""
        check_root(tmp_path)

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Nonexistent roots fail before traversal."""
        with pytest.raises(ConfigurationError, match="Path does not exist"):
            check_root(tmp_path / "missing")

    def test_file_is_not_a_root(self, tmp_path: Path) -> None:
        """A regular file is rejected as a root."""
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")

        with pytest.raises(ConfigurationError, match="not a directory"):
            check_root(file_path)
