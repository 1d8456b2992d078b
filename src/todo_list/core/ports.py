# src/todo_list/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the menu.

Menu actions depend on Protocols instead of concrete implementations,
so tests can drive them with an in-memory console.
"""

from pathlib import Path
from typing import Any, Protocol


class TaskRepo(Protocol):
    def add(self, title: str, description: str) -> int: ...
    def list_all(self) -> list[Any]: ...
    def list_by_status(self, completed: bool) -> list[Any]: ...
    def complete(self, task_id: int) -> None: ...
    def delete(self, task_id: int) -> None: ...
    def count_tasks(self) -> int: ...

    # Persistence
    def save(self, path: str | Path) -> None: ...
    def load(self, path: str | Path) -> int: ...


class Console(Protocol):
    """
    Line-oriented terminal.

    read_line raises EOFError / KeyboardInterrupt when input ends,
    the same way input() does.
    """

    def read_line(self, prompt: str = "") -> str: ...
    def write(self, text: str = "") -> None: ...
    def clear(self) -> None: ...
