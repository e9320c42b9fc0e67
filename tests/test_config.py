"""Tests for taskbook.config module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from taskbook.config import (
    CONFIG_FILE,
    DEFAULT_TASKS_FILE,
    TASKBOOK_DIR,
    StorageConfig,
    TaskbookConfig,
)


class TestStorageConfig:
    """Tests for StorageConfig model."""

    def test_defaults(self) -> None:
        """Test default task file location."""
        config = StorageConfig()
        assert Path(config.path) == DEFAULT_TASKS_FILE

    def test_invalid_path_type(self) -> None:
        """Test that non-string paths are rejected."""
        with pytest.raises(Exception):
            StorageConfig(path=["not", "a", "path"])  # type: ignore[arg-type]


class TestTaskbookConfig:
    """Tests for TaskbookConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = TaskbookConfig()
        assert config.storage.path == ".taskbook/tasks.txt"

    def test_load_missing_file(self, temp_project: Path) -> None:
        """Test loading returns defaults when the file doesn't exist."""
        config = TaskbookConfig.load(temp_project / "missing.json")
        assert config == TaskbookConfig()

    def test_load_default_location(self, temp_project: Path) -> None:
        """Test load reads .taskbook/config.json by default."""
        (temp_project / ".taskbook").mkdir()
        (temp_project / ".taskbook" / "config.json").write_text(
            json.dumps({"storage": {"path": "elsewhere/tasks.txt"}})
        )

        config = TaskbookConfig.load()

        assert config.storage.path == "elsewhere/tasks.txt"

    def test_load_partial_config(self, tmp_path: Path) -> None:
        """Test missing sections fall back to defaults."""
        path = tmp_path / "config.json"
        path.write_text("{}")

        config = TaskbookConfig.load(path)

        assert config.storage.path == ".taskbook/tasks.txt"

    def test_save_creates_directory(self, tmp_path: Path) -> None:
        """Test save creates parent directory if needed."""
        path = tmp_path / "nested" / "config.json"
        config = TaskbookConfig(storage=StorageConfig(path="my/tasks.txt"))

        config.save(path)

        with open(path) as f:
            data = json.load(f)
        assert data == {"storage": {"path": "my/tasks.txt"}}

    def test_save_then_load(self, tmp_path: Path) -> None:
        """Test saved config loads back the same."""
        path = tmp_path / "config.json"
        config = TaskbookConfig(storage=StorageConfig(path="a/b.txt"))

        config.save(path)

        assert TaskbookConfig.load(path) == config


class TestConstants:
    """Tests for module constants."""

    def test_paths(self) -> None:
        """Test config files live under .taskbook."""
        assert TASKBOOK_DIR == Path(".taskbook")
        assert CONFIG_FILE == TASKBOOK_DIR / "config.json"
        assert DEFAULT_TASKS_FILE == TASKBOOK_DIR / "tasks.txt"
