from pathlib import Path
from typing import Union


class TodoError(Exception):
    """Base exception for todo domain errors."""

    pass


class ParseError(TodoError):
    """Raised when the tasks file exists but does not hold a valid task list."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to parse {self.path}: {reason}")


class InvalidIdError(TodoError):
    """Raised when a task id argument is not an unsigned integer."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Invalid ID: {raw!r}")
