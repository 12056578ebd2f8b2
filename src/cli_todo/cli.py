"""Command-line entry: two positional tokens, COMMAND and optional DATA.

Aliases like -a/-d/-t/-l/-h are commands, not options, so the click parser
is told to pass unknown option-looking tokens through as positionals.
Dispatch reads the raw tokens so a bare "--" is kept as a value too.
"""
from functools import wraps
from typing import Callable, Dict, List, Optional

import typer
from click.exceptions import Exit
from typer.core import TyperCommand

from cli_todo import commands
from cli_todo.errors import TodoError
from cli_todo.storage import Storage, TASKS_FILE


def error_feedback(f):
    """Report fatal errors on stderr and exit 1 instead of dumping a traceback."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except TodoError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e
        except OSError as e:
            typer.echo(f"File error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper


Handler = Callable[[Storage, str], None]

COMMANDS: Dict[str, Handler] = {
    'add': commands.add_task,
    '-a': commands.add_task,
    'delete': commands.delete_task,
    '-d': commands.delete_task,
    'toggle': commands.toggle_completed,
    '-t': commands.toggle_completed,
    'list': lambda store, data: commands.list_tasks(store),
    '-l': lambda store, data: commands.list_tasks(store),
}


def dispatch(command: str, data: str, store: Storage) -> None:
    handler = COMMANDS.get(command)
    if handler is None:
        # help, -h and anything unrecognized
        commands.print_help()
        return
    handler(store, data)


RAW_ARGS_KEY = "cli_todo.raw_args"


class RawArgsCommand(TyperCommand):
    """Command that records the tokens it was given before click parses them.

    click swallows a bare "--" as its end-of-options marker even with
    ignore_unknown_options, so dispatch reads the recorded tokens instead.
    """

    def parse_args(self, ctx, args):
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


app = typer.Typer(add_completion=False)


@app.command(
    cls=RawArgsCommand,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
@error_feedback
def run(
    ctx: typer.Context,
    argv: Optional[List[str]] = typer.Argument(None, help="COMMAND [DATA]"),
):
    """Todo CLI tool: add, delete, toggle and list tasks stored in tasks.json."""
    args = ctx.meta.get(RAW_ARGS_KEY, argv or [])
    if not args:
        typer.echo("Error: no command given", err=True)
        raise typer.Exit(1)
    command = args[0]
    data = args[1] if len(args) > 1 else ""
    dispatch(command, data, Storage(TASKS_FILE))
