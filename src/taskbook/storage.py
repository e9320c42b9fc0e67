"""Task file storage.

Tasks are kept in a flat text file, one task per line::

    T | 1 | read book
    D | 0 | submit report | 2019-12-02 1800
    E | 1 | team sync | 2019-12-01 1400 | 2019-12-01 1500

Loading is forgiving about individual lines (bad lines are skipped with a
warning) but strict about the file itself: if it cannot be created or read,
``StorageLoadError`` is raised. Saving never raises; failures are printed
and the in-memory list stays as it was.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from taskbook.dates import parse_datetime
from taskbook.errors import InvalidFormatError, StorageLoadError
from taskbook.tasks import FIELD_SEPARATOR, Deadline, Event, Task, ToDo

console = Console(stderr=True)

LOAD_ERROR_MESSAGE = "Error loading tasks from file."


def _decode_todo(fields: list[str]) -> Task:
    if len(fields) != 3:
        raise InvalidFormatError("Invalid ToDo format.")
    return ToDo(fields[2])


def _decode_deadline(fields: list[str]) -> Task:
    if len(fields) != 4:
        raise InvalidFormatError("Invalid Deadline format.")
    return Deadline(fields[2], parse_datetime(fields[3]))


def _decode_event(fields: list[str]) -> Task:
    if len(fields) != 5:
        raise InvalidFormatError("Invalid Event format.")
    return Event(fields[2], parse_datetime(fields[3]), parse_datetime(fields[4]))


DECODERS: dict[str, Callable[[list[str]], Task]] = {
    ToDo.kind: _decode_todo,
    Deadline.kind: _decode_deadline,
    Event.kind: _decode_event,
}


class Storage:
    """Loads and saves the task list at a single path."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[Task]:
        """Load tasks from the file, in file order.

        A missing file is created (with its parent directories) and yields
        an empty list. Lines with an unknown kind tag, the wrong number of
        fields, or a bad date are skipped with a warning.

        Returns:
            The tasks that could be decoded

        Raises:
            StorageLoadError: If the file cannot be created or read
        """
        try:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
                return []

            # Only line breaks end a line; form feeds and the like stay in the text
            with open(self.path, encoding="utf-8") as f:
                lines = [line.rstrip("\n") for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise StorageLoadError(LOAD_ERROR_MESSAGE) from e

        tasks: list[Task] = []
        for line in lines:
            task = self._decode_line(line)
            if task is not None:
                tasks.append(task)

        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Overwrite the file with one line per task.

        Errors are reported on the console and never raised.
        """
        content = "".join(f"{task.to_file_format()}\n" for task in tasks)

        try:
            # Encode before opening so a bad task never truncates the file
            data = content.replace("\n", os.linesep).encode("utf-8")
            self.path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.path, "wb") as f:
                f.write(data)
        except (OSError, UnicodeError) as e:
            console.print(f"[red]Error saving tasks to file:[/red] {escape(str(e))}")

    def _decode_line(self, line: str) -> Task | None:
        """Decode one line, or warn and return None."""
        fields = line.split(FIELD_SEPARATOR)
        # Trailing empty fields do not count, so "T | 0 | " is a short line
        while len(fields) > 1 and not fields[-1]:
            fields.pop()

        decoder = DECODERS.get(fields[0])
        if decoder is None:
            console.print(
                "[yellow]Warning: Unrecognized task type in file. Skipping line:[/yellow] "
                f"{escape(line)}"
            )
            return None

        try:
            task = decoder(fields)
        except InvalidFormatError as e:
            console.print(
                "[yellow]Warning: Corrupted data in file. Skipping line:[/yellow] "
                f"{escape(line)} [dim]({escape(str(e))})[/dim]"
            )
            return None

        if fields[1] == "1":
            task.mark_as_done()

        return task
