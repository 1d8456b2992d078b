# src/todo_list/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


class TaskError(Exception):
    """Base class for task list errors that are safe to show to the user."""


class ValidationError(TaskError, ValueError):
    """A task field violates the non-blank / non-null constraints."""


class NotFoundError(TaskError, LookupError):
    """An operation referenced a task id that is not in the store."""


def parse_task_id(raw: str) -> int | None:
    """
    Parse a decimal task id: optional sign, ASCII digits, surrounding whitespace.
    Returns None for anything else ("1_0", "1.5", non-ASCII digits, "").
    """
    text = raw.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits.isascii() or not digits.isdigit():
        return None
    return int(text)


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    Fields are validated on construction. After that only `completed`
    is expected to change (see TaskStore.complete).
    """

    id: int
    title: str
    description: str
    completed: bool = False

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a task id.
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise ValidationError("Task id must be a positive integer.")
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValidationError("Title cannot be empty.")
        if not isinstance(self.description, str):
            raise ValidationError("Description is required.")
        self.completed = bool(self.completed)

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Title: {self.title}, "
            f"Description: {self.description}, Completed: {self.completed}"
        )
