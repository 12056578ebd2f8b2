"""Task collection: ordering, ID management, mutation, and rendering.

Tasks are kept in insertion order and listed in that order; nothing here
ever re-sorts. IDs come from max(existing) + 1 over the current collection.
"""
from datetime import date
from typing import Iterable, Iterator, List, Optional
from cli_todo.models import Task, DATE_FORMAT
from cli_todo.theme import color, BOLD, HEADER_COLOR, ROW_COLOR
import typer

ID_WIDTH = 5
DESCRIPTION_WIDTH = 70
COMPLETED_WIDTH = 10
RULE_WIDTH = 100
HEADERS = ("ID", "Description", "Completed", "Date Created")


def today_stamp() -> str:
    """Local wall-clock date formatted MM/DD/YY."""
    return date.today().strftime(DATE_FORMAT)


class TaskList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self.tasks: List[Task] = list(tasks) if tasks else []

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self.tasks == other.tasks

    # -------------------- id management --------------------
    def next_id(self) -> int:
        return max((t.id for t in self.tasks), default=0) + 1

    def ids(self) -> List[int]:
        return [t.id for t in self.tasks]

    # -------------------- task operations --------------------
    def add(self, description: str, date_created: Optional[str] = None) -> Task:
        task = Task(
            id=self.next_id(),
            description=description,
            completed=False,
            date_created=today_stamp() if date_created is None else date_created,
        )
        self.tasks.append(task)
        return task

    def remove_by_id(self, task_id: int) -> Optional[Task]:
        """Remove the first task whose id equals task_id; None if absent."""
        for idx, task in enumerate(self.tasks):
            if task.id == task_id:
                return self.tasks.pop(idx)
        return None

    def toggle_by_text(self, raw_id: str) -> Optional[Task]:
        """Flip completion on the task whose id, as decimal text, equals raw_id.

        Matching is on the rendered id, so "01" or " 1" never match id 1.
        """
        for task in self.tasks:
            if str(task.id) == raw_id:
                task.toggle()
                return task
        return None

    # -------------------- display --------------------
    def render(self) -> str:
        header = self._row(HEADERS, HEADER_COLOR, BOLD)
        lines = ["", header, color("-" * RULE_WIDTH, HEADER_COLOR, BOLD)]
        for task in self.tasks:
            cells = (str(task.id), task.description, _bool_text(task.completed), task.date_created)
            lines.append(self._row(cells, ROW_COLOR))
            lines.append("")
        return "\n".join(lines)

    def display(self) -> None:
        typer.echo(self.render())

    @staticmethod
    def _row(cells, *styles: str) -> str:
        ident, description, completed, created = cells
        # pad on plain text so ANSI codes don't eat column width
        return " ".join([
            color(f"{ident:<{ID_WIDTH}}", *styles),
            color(f"{description:<{DESCRIPTION_WIDTH}}", *styles),
            color(f"{completed:<{COMPLETED_WIDTH}}", *styles),
            color(created, *styles),
        ])


def _bool_text(value: bool) -> str:
    return "true" if value else "false"
