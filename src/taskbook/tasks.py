"""Task models for taskbook.

Three kinds of task share one base class. Each kind knows how to render
itself as a line of the task file, so storage never branches on kind.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from taskbook.dates import display_datetime, format_datetime
from taskbook.errors import TaskIndexError

FIELD_SEPARATOR = " | "


@dataclass
class Task:
    """Base class for every task kind."""

    kind: ClassVar[str] = ""

    description: str
    is_done: bool = field(default=False, kw_only=True)

    def mark_as_done(self) -> None:
        """Mark the task as done."""
        self.is_done = True

    def mark_as_undone(self) -> None:
        """Mark the task as not done."""
        self.is_done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def to_file_format(self) -> str:
        """Render the task as one line of the task file (no line break)."""
        parts = [self.kind, "1" if self.is_done else "0", self.description]
        parts.extend(self._file_fields())
        return FIELD_SEPARATOR.join(parts)

    def when(self) -> str:
        """Human-readable timing, empty for tasks without dates."""
        return ""

    def _file_fields(self) -> list[str]:
        """Kind-specific fields appended after the description."""
        return []

    def __str__(self) -> str:
        text = f"[{self.kind}][{self.status_icon}] {self.description}"
        when = self.when()
        return f"{text} ({when})" if when else text


@dataclass
class ToDo(Task):
    """A plain task with no dates."""

    kind: ClassVar[str] = "T"


@dataclass
class Deadline(Task):
    """A task that must be done by a point in time."""

    kind: ClassVar[str] = "D"

    by: datetime

    def when(self) -> str:
        return f"by: {display_datetime(self.by)}"

    def _file_fields(self) -> list[str]:
        return [format_datetime(self.by)]


@dataclass
class Event(Task):
    """A task spanning a start and an end time.

    The start is not required to come before the end.
    """

    kind: ClassVar[str] = "E"

    start: datetime
    end: datetime

    def when(self) -> str:
        return f"from: {display_datetime(self.start)} to: {display_datetime(self.end)}"

    def _file_fields(self) -> list[str]:
        return [format_datetime(self.start), format_datetime(self.end)]


@dataclass
class TaskList:
    """An ordered collection of tasks addressed by 1-based number."""

    tasks: list[Task] = field(default_factory=list)

    def add(self, task: Task) -> None:
        """Add a task to the end of the list."""
        self.tasks.append(task)

    def get(self, number: int) -> Task:
        """Get a task by its 1-based number.

        Raises:
            TaskIndexError: If no task has that number
        """
        if number < 1 or number > len(self.tasks):
            raise TaskIndexError(f"Invalid task number: {number}")
        return self.tasks[number - 1]

    def remove(self, number: int) -> Task:
        """Remove and return a task by its 1-based number.

        Raises:
            TaskIndexError: If no task has that number
        """
        task = self.get(number)
        del self.tasks[number - 1]
        return task

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Return (number, task) pairs whose description contains keyword."""
        needle = keyword.lower()
        return [
            (i, task)
            for i, task in enumerate(self.tasks, 1)
            if needle in task.description.lower()
        ]

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)
