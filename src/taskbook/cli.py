"""CLI interface for taskbook."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from taskbook import __version__
from taskbook.config import TaskbookConfig
from taskbook.dates import parse_datetime
from taskbook.errors import InvalidDateFormatError, StorageLoadError, TaskIndexError
from taskbook.storage import Storage
from taskbook.tasks import FIELD_SEPARATOR, Deadline, Event, Task, TaskList, ToDo

console = Console()


class DateTimeParamType(click.ParamType):
    """Click parameter accepting ``yyyy-MM-dd HHmm``."""

    name = "datetime"

    def convert(
        self,
        value: str | datetime,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> datetime:
        if isinstance(value, datetime):
            return value

        try:
            return parse_datetime(value)
        except InvalidDateFormatError as e:
            self.fail(str(e), param, ctx)


DATETIME = DateTimeParamType()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="taskbook")
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="TASKBOOK_FILE",
    help="Task file to use (overrides .taskbook/config.json)",
)
@click.pass_context
def main(ctx: click.Context, file_path: Path | None) -> None:
    """taskbook - a personal task list.

    \b
    Examples:
      taskbook todo read book
      taskbook deadline submit report --by "2019-12-02 1800"
      taskbook event team sync --from "2019-12-01 1400" --to "2019-12-01 1500"
      taskbook mark 1
      taskbook list
    """
    # If no subcommand, show help without touching the task file
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    ctx.ensure_object(dict)
    config = TaskbookConfig.load()
    storage = Storage(file_path or config.storage.path)

    try:
        tasks = storage.load()
    except StorageLoadError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        ctx.exit(1)

    ctx.obj["storage"] = storage
    ctx.obj["tasks"] = TaskList(tasks)


def _join_description(words: tuple[str, ...]) -> str:
    """Join description words, rejecting text the task file cannot hold."""
    description = " ".join(words).strip()
    if not description:
        raise click.BadParameter("The description cannot be empty.", param_hint="DESCRIPTION")
    # " |" at the end would merge with the separator that follows it
    if FIELD_SEPARATOR in f" {description} ":
        raise click.BadParameter(
            f"The description cannot contain {FIELD_SEPARATOR!r} or start or end with a lone '|'.",
            param_hint="DESCRIPTION",
        )
    if any(c in description for c in "\r\n"):
        raise click.BadParameter("The description must fit on one line.", param_hint="DESCRIPTION")
    return description


def _save(ctx: click.Context) -> None:
    storage: Storage = ctx.obj["storage"]
    storage.save(ctx.obj["tasks"])


def _add(ctx: click.Context, task: Task) -> None:
    """Add a task, save, and report."""
    tasks: TaskList = ctx.obj["tasks"]
    tasks.add(task)
    _save(ctx)

    console.print(f"[green]Added:[/green] {escape(str(task))}")
    console.print(f"[dim]Now you have {len(tasks)} tasks in the list.[/dim]")


def _get_task(ctx: click.Context, number: int) -> Task:
    tasks: TaskList = ctx.obj["tasks"]
    try:
        return tasks.get(number)
    except TaskIndexError:
        _invalid_number(ctx, number)


def _invalid_number(ctx: click.Context, number: int) -> NoReturn:
    tasks: TaskList = ctx.obj["tasks"]
    if tasks:
        console.print(f"[red]Invalid task number:[/red] {number} (must be 1-{len(tasks)})")
    else:
        console.print(f"[red]Invalid task number:[/red] {number} (the list is empty)")
    ctx.exit(1)


def _task_table(title: str, rows: list[tuple[int, Task]]) -> Table:
    table = Table(title=title, show_header=True)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Type", style="dim", width=4)
    table.add_column("Done", width=4)
    table.add_column("Description", style="white")
    table.add_column("When", style="dim")

    for number, task in rows:
        done = "[green]✓[/green]" if task.is_done else ""
        table.add_row(
            str(number),
            task.kind,
            done,
            escape(task.description),
            escape(task.when()),
        )

    return table


@main.command("list")
@click.pass_context
def list_command(ctx: click.Context) -> None:
    """List all tasks."""
    tasks: TaskList = ctx.obj["tasks"]

    if not tasks:
        console.print("[dim]No tasks yet.[/dim] Add one with [cyan]taskbook todo[/cyan]")
        return

    console.print(_task_table("Tasks", list(enumerate(tasks, 1))))

    done = sum(1 for task in tasks if task.is_done)
    console.print(f"[dim]{done}/{len(tasks)} done[/dim]")


@main.command()
@click.argument("description", nargs=-1, required=True)
@click.pass_context
def todo(ctx: click.Context, description: tuple[str, ...]) -> None:
    """Add a to-do."""
    _add(ctx, ToDo(_join_description(description)))


@main.command()
@click.argument("description", nargs=-1, required=True)
@click.option("--by", "-b", "by", type=DATETIME, required=True, help="Due time (yyyy-MM-dd HHmm)")
@click.pass_context
def deadline(ctx: click.Context, description: tuple[str, ...], by: datetime) -> None:
    """Add a task with a due time.

    Example:

        taskbook deadline submit report --by "2019-12-02 1800"
    """
    _add(ctx, Deadline(_join_description(description), by))


@main.command()
@click.argument("description", nargs=-1, required=True)
@click.option("--from", "start", type=DATETIME, required=True, help="Start (yyyy-MM-dd HHmm)")
@click.option("--to", "end", type=DATETIME, required=True, help="End (yyyy-MM-dd HHmm)")
@click.pass_context
def event(ctx: click.Context, description: tuple[str, ...], start: datetime, end: datetime) -> None:
    """Add an event with a start and end time.

    Example:

        taskbook event team sync --from "2019-12-01 1400" --to "2019-12-01 1500"
    """
    _add(ctx, Event(_join_description(description), start, end))


@main.command()
@click.argument("number", type=int)
@click.pass_context
def mark(ctx: click.Context, number: int) -> None:
    """Mark a task as done."""
    task = _get_task(ctx, number)
    task.mark_as_done()
    _save(ctx)

    console.print(f"[green]Marked as done:[/green] {escape(str(task))}")


@main.command()
@click.argument("number", type=int)
@click.pass_context
def unmark(ctx: click.Context, number: int) -> None:
    """Mark a task as not done."""
    task = _get_task(ctx, number)
    task.mark_as_undone()
    _save(ctx)

    console.print(f"[yellow]Marked as not done:[/yellow] {escape(str(task))}")


@main.command()
@click.argument("number", type=int)
@click.pass_context
def delete(ctx: click.Context, number: int) -> None:
    """Delete a task."""
    tasks: TaskList = ctx.obj["tasks"]
    try:
        task = tasks.remove(number)
    except TaskIndexError:
        _invalid_number(ctx, number)

    _save(ctx)

    console.print(f"[green]Removed:[/green] {escape(str(task))}")
    console.print(f"[dim]Now you have {len(tasks)} tasks in the list.[/dim]")


@main.command()
@click.argument("keyword")
@click.pass_context
def find(ctx: click.Context, keyword: str) -> None:
    """Find tasks whose description contains KEYWORD."""
    tasks: TaskList = ctx.obj["tasks"]
    matches = tasks.find(keyword)

    if not matches:
        console.print(f"[dim]No tasks match[/dim] {escape(keyword)}")
        return

    console.print(_task_table(f"Matching {escape(keyword)!r}", matches))


if __name__ == "__main__":
    main()
