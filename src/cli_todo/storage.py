"""Persistence for the task list: whole-file load and whole-file save.

The file is a pretty-printed JSON array of task records. Every save rewrites
the entire file; there is no append or partial update, and no locking.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union
from cli_todo.errors import ParseError
from cli_todo.models import Task
from cli_todo.tasklist import TaskList

logger = logging.getLogger(__name__)

TASKS_FILE = Path('tasks.json')

TaskEntry = Dict[str, Any]


class Storage:
    def __init__(self, path: Union[str, Path] = TASKS_FILE):
        self.path = Path(path)

    def load(self) -> TaskList:
        """Load the task list from disk.

        Missing or unreadable file -> empty list. Content that is not a valid
        task array raises ParseError.
        """
        try:
            text = self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            logger.debug(f"{self.path} not found, starting with an empty list")
            return TaskList()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"{self.path} unreadable ({e}), starting with an empty list")
            return TaskList()
        return parse_tasks(text, self.path)

    def save(self, tasks: TaskList) -> None:
        """Overwrite the file with the full task list (pretty-printed)."""
        contents = dump_tasks(tasks)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(contents, encoding='utf-8')
        logger.debug(f"Saved {len(tasks)} tasks to {self.path}")


def dump_tasks(tasks: TaskList) -> str:
    entries: List[TaskEntry] = [
        {
            'id': task.id,
            'description': task.description,
            'completed': task.completed,
            'date_created': task.date_created,
        }
        for task in tasks
    ]
    return json.dumps(entries, indent=2, ensure_ascii=False)


def parse_tasks(text: str, path: Union[str, Path] = TASKS_FILE) -> TaskList:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(path, str(e)) from e
    if not isinstance(data, list):
        raise ParseError(path, f"expected a JSON array, got {type(data).__name__}")
    return TaskList(_task_from_entry(raw, idx, path) for idx, raw in enumerate(data))


def _task_from_entry(raw: Any, idx: int, path: Union[str, Path]) -> Task:
    if not isinstance(raw, dict):
        raise ParseError(path, f"entry {idx} is not an object")
    for key in ('id', 'description', 'completed', 'date_created'):
        if key not in raw:
            raise ParseError(path, f"entry {idx} is missing field {key!r}")
    tid = raw['id']
    # bool is an int subclass; reject it explicitly
    if isinstance(tid, bool) or not isinstance(tid, int) or tid < 0:
        raise ParseError(path, f"entry {idx} has invalid id {tid!r}")
    if not isinstance(raw['description'], str):
        raise ParseError(path, f"entry {idx} has a non-string description")
    if not isinstance(raw['completed'], bool):
        raise ParseError(path, f"entry {idx} has a non-boolean completed flag")
    if not isinstance(raw['date_created'], str):
        raise ParseError(path, f"entry {idx} has a non-string date_created")
    return Task(
        id=tid,
        description=raw['description'],
        completed=raw['completed'],
        date_created=raw['date_created'],
    )
