"""Shared fixtures for taskbook tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture
def temp_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    monkeypatch.delenv("TASKBOOK_FILE", raising=False)
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def sample_lines() -> list[str]:
    """Lines of a well-formed task file."""
    return [
        "T | 1 | read book",
        "D | 0 | submit report | 2019-12-02 1800",
        "E | 1 | team sync | 2019-12-01 1400 | 2019-12-01 1500",
    ]


@pytest.fixture
def tasks_file(tmp_path: Path, sample_lines: list[str]) -> Path:
    """Create a task file holding the sample lines."""
    path = tmp_path / "data" / "tasks.txt"
    path.parent.mkdir()
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path
