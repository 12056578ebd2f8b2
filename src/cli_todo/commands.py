"""Command handlers: one load-mutate-save cycle per invocation.

Every handler takes the store it works on. Fatal conditions are raised and
left for the CLI boundary to turn into an exit status; toggle reports its
own load/save failures on stderr and returns normally.
"""
import logging
from typing import Optional

import typer

from cli_todo.errors import InvalidIdError, ParseError
from cli_todo.storage import Storage
from cli_todo.theme import color, BANNER_COLOR, BOLD, ROW_COLOR, SECTION_COLOR

logger = logging.getLogger(__name__)


def add_task(store: Storage, data: str, date_created: Optional[str] = None) -> None:
    tasks = store.load()
    task = tasks.add(data, date_created=date_created)
    store.save(tasks)
    logger.debug(f"Added task {task.id}")
    tasks.display()


def delete_task(store: Storage, data: str) -> None:
    tasks = store.load()
    task_id = parse_id(data)
    removed = tasks.remove_by_id(task_id)
    if removed is None:
        typer.echo(f"Task with ID {task_id} not found")
        return
    store.save(tasks)
    tasks.display()
    typer.echo(f"Task with ID {task_id} removed successfully")


def toggle_completed(store: Storage, data: str) -> None:
    try:
        tasks = store.load()
    except ParseError as e:
        logger.warning(f"Toggle aborted, load failed: {e}")
        typer.echo(f"Error loading tasks from json file: {e}", err=True)
        return

    task = tasks.toggle_by_text(data)
    if task is None:
        typer.echo(f"Task with ID {data} not found")
    else:
        logger.debug(f"Task {task.id} completed={task.completed}")

    try:
        store.save(tasks)
    except OSError as e:
        logger.warning(f"Toggle save failed: {e}")
        typer.echo(f"Error updating task in json file: {e}", err=True)
        return
    tasks.display()


def list_tasks(store: Storage) -> None:
    store.load().display()


def print_help() -> None:
    typer.echo(color("Todo CLI tool", BANNER_COLOR, BOLD))
    typer.echo(" ")
    typer.echo(color("USAGE:", SECTION_COLOR))
    typer.echo(color("     cli-todo [COMMAND]", ROW_COLOR))
    typer.echo(color("     cli-todo [COMMAND] [DATA]", ROW_COLOR))
    typer.echo(" ")
    typer.echo(color("Available commands:", SECTION_COLOR))
    typer.echo(color("     COMMAND [DATA]", BOLD))
    for usage, summary in HELP_LINES:
        typer.echo(color(f"     {usage:<39}{summary}", ROW_COLOR))


HELP_LINES = (
    ("add [task], -a [task]", "Adds task to list."),
    ("delete [taskID], -d [taskID]", "Deletes task based on ID."),
    ("toggle [taskID], -t [taskID]", "Toggles task completed status based on ID."),
    ("list, -l", "Lists current tasks."),
    ("help, -h", "Displays this help menu."),
)


def parse_id(data: str) -> int:
    """Parse an unsigned decimal task id; anything else raises InvalidIdError.

    One leading '+' is allowed ("+1" is id 1); signs, spaces and
    non-ASCII digits are not.
    """
    digits = data[1:] if data.startswith('+') else data
    # str.isdigit accepts superscripts and other non-ASCII digits int() rejects
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidIdError(data)
    return int(digits)
