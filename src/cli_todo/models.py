"""Data models for the todo CLI.

Only the Task dataclass lives here. Field names double as the JSON keys
written to tasks.json, so renaming one is a storage format change.
"""
from __future__ import annotations
from dataclasses import dataclass

DATE_FORMAT = "%m/%d/%y"


@dataclass
class Task:
    """A single to-do item.

    Fields:
        id: Positive integer, max existing id + 1 at creation.
        description: Free-form text, stored exactly as given (may be empty).
        completed: Flipped by toggle; False on creation.
        date_created: Local date of creation as MM/DD/YY, never rewritten.
    """
    id: int
    description: str
    completed: bool = False
    date_created: str = ""

    def toggle(self) -> None:
        self.completed = not self.completed
