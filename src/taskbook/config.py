"""Configuration models for taskbook."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """Configuration for the task file."""

    path: str = ".taskbook/tasks.txt"


class TaskbookConfig(BaseModel):
    """Main configuration for taskbook."""

    storage: StorageConfig = Field(default_factory=StorageConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TaskbookConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(exclude_none=True), f, indent=2)


# Default config directory
TASKBOOK_DIR = Path(".taskbook")
CONFIG_FILE = TASKBOOK_DIR / "config.json"
DEFAULT_TASKS_FILE = TASKBOOK_DIR / "tasks.txt"
