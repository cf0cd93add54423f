"""Command-line interface for editing a todo.txt file."""

import logging
import sys
from datetime import date
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..config import ConfigModel, get_config, load_config
from ..errors import TodoTxtError
from ..task_list import TaskList
from ..todo import Todo
from ..utils.dates import parse_date_input

logger = logging.getLogger(__name__)


def get_console() -> Console:
    """Console bound to the current stdout."""
    return Console()


def get_error_console() -> Console:
    """Console bound to the current stderr."""
    return Console(stderr=True)


def reject_line_breaks(ctx, param, value):
    """Keep task text on one line so it stays one todo."""
    if value is not None and ("\n" in value or "\r" in value):
        raise click.BadParameter("task text must not contain line breaks")
    return value


def load_task_list(path: Path, encoding: str) -> TaskList:
    """Read the todo file, treating a missing file as an empty list."""
    if not path.exists():
        logger.debug("%s does not exist yet, starting with an empty list", path)
        return TaskList(path=str(path))
    return TaskList.read_file(path, encoding=encoding)


def format_todo_for_display(todo: Todo) -> Text:
    """Render a todo as styled text: projects, contexts and priority highlighted."""
    if not todo.to_string():
        return Text("(blank, dropped on save)", style="dim italic")

    text = Text()
    if todo.priority:
        text.append(f"({todo.priority}) ", style="bold yellow")
    for index, word in enumerate(todo.task.split(" ")):
        if index:
            text.append(" ")
        if word.startswith("+") and len(word) > 1:
            text.append(word, style="magenta")
        elif word.startswith("@") and len(word) > 1:
            text.append(word, style="cyan")
        else:
            text.append(word)
    if todo.completed:
        text.stylize("dim strike")
    return text


class TodoFile:
    """The todo file a command operates on, with its config."""

    def __init__(self, config: ConfigModel, path: Path):
        self.config = config
        self.path = path

    def load(self) -> TaskList:
        return load_task_list(self.path, self.config.encoding)

    def save(self, task_list: TaskList) -> None:
        task_list.write_file(self.path, encoding=self.config.encoding)

    def edit(self, index: int, action: Callable[[TaskList, int], TaskList], verb: str) -> None:
        """Apply ``action`` to the 1-based ``index`` and save if anything changed."""
        task_list = self.load()
        updated = action(task_list, index - 1)

        if updated is task_list:
            get_console().print(f"[yellow]No task {index} (list has {len(task_list)} tasks)[/yellow]")
            return

        self.save(updated)
        get_console().print(f"[green]{verb} {index}: {escape(updated[index - 1].to_string())}[/green]")


def run_command(func: Callable[[], None]) -> None:
    """Run ``func``, reporting todo-txt errors and exiting non-zero."""
    try:
        func()
    except TodoTxtError as e:
        get_error_console().print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--file", "-f", "todo_file", type=click.Path(dir_okay=False), help="todo.txt file to use")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx, config_path, todo_file, verbose):
    """Read and edit todo.txt files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = load_config(Path(config_path)) if config_path else get_config()
    path = Path(todo_file).expanduser() if todo_file else config.get_todo_path()

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["todo_file"] = TodoFile(config, path)


@cli.command(name="list")
@click.option("--all", "-a", "show_all", is_flag=True, help="Include completed tasks")
@click.pass_obj
def list_todos(obj, show_all):
    """List tasks with their line numbers."""
    def _list():
        task_list = obj["todo_file"].load()
        console = get_console()

        rows = [(n, todo) for n, todo in enumerate(task_list, start=1)
                if show_all or not todo.completed]
        if not rows:
            console.print("[dim]No tasks[/dim]")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Done")
        table.add_column("Created")
        table.add_column("Completed")
        table.add_column("Task")

        for number, todo in rows:
            table.add_row(
                str(number),
                "x" if todo.completed else "",
                todo.start_date.isoformat() if todo.start_date else "",
                todo.end_date.isoformat() if todo.end_date else "",
                format_todo_for_display(todo),
            )
        console.print(table)

    run_command(_list)


@cli.command()
@click.argument("text", callback=reject_line_breaks)
@click.option("--date", "-d", "when", help="Creation date, e.g. 2024-01-31 or 'yesterday'")
@click.pass_obj
def add(obj, text, when):
    """Add a task line to the end of the file."""
    def _add():
        todo_file = obj["todo_file"]
        todo = Todo.parse(text)

        if todo.start_date is None:
            if when:
                try:
                    todo = todo.set_start_date(parse_date_input(when))
                except ValueError as e:
                    raise click.BadParameter(str(e), param_hint="--date")
            elif todo_file.config.auto_date:
                todo = todo.set_start_date(date.today())

        task_list = todo_file.load().add(todo)
        todo_file.save(task_list)
        get_console().print(f"[green]Added {len(task_list)}: {escape(todo.to_string())}[/green]")

    run_command(_add)


@cli.command()
@click.argument("index", type=int)
@click.pass_obj
def done(obj, index):
    """Mark task INDEX as completed."""
    run_command(lambda: obj["todo_file"].edit(index, TaskList.complete_at, "Completed"))


@cli.command()
@click.argument("index", type=int)
@click.pass_obj
def undone(obj, index):
    """Mark task INDEX as not completed."""
    run_command(lambda: obj["todo_file"].edit(
        index, lambda tl, i: tl.set_completed_at(i, False), "Reopened"))


@cli.command()
@click.argument("index", type=int)
@click.argument("priority")
@click.pass_obj
def pri(obj, index, priority):
    """Set the priority of task INDEX to a letter A-Z."""
    run_command(lambda: obj["todo_file"].edit(
        index, lambda tl, i: tl.set_priority_at(i, priority), "Prioritized"))


@cli.command()
@click.argument("index", type=int)
@click.pass_obj
def depri(obj, index):
    """Remove the priority of task INDEX."""
    run_command(lambda: obj["todo_file"].edit(index, TaskList.clear_priority_at, "Deprioritized"))


@cli.command()
@click.argument("index", type=int)
@click.argument("text", callback=reject_line_breaks)
@click.pass_obj
def append(obj, index, text):
    """Add TEXT to the end of task INDEX."""
    run_command(lambda: obj["todo_file"].edit(
        index, lambda tl, i: tl.append_task_at(i, text), "Updated"))


@cli.command()
@click.argument("index", type=int)
@click.argument("text", callback=reject_line_breaks)
@click.pass_obj
def prepend(obj, index, text):
    """Add TEXT to the start of task INDEX."""
    run_command(lambda: obj["todo_file"].edit(
        index, lambda tl, i: tl.prepend_task_at(i, text), "Updated"))


@cli.command()
@click.argument("index", type=int)
@click.argument("text", callback=reject_line_breaks)
@click.pass_obj
def replace(obj, index, text):
    """Replace the text of task INDEX, keeping its priority, dates and status."""
    run_command(lambda: obj["todo_file"].edit(
        index, lambda tl, i: tl.set_task_at(i, text), "Replaced"))


def main(args: Optional[list] = None) -> None:
    cli(args=args, obj={})


if __name__ == "__main__":
    main()
