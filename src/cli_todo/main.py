"""Main entry point for the todo CLI."""
import logging
import os

from cli_todo.cli import app

LOG_FORMAT = "[todo] %(levelname)s %(message)s"


def configure_logging() -> None:
    level = logging.getLevelName(os.getenv("TODO_LOG_LEVEL", "WARNING").upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main():
    configure_logging()
    app()


if __name__ == "__main__":
    main()
