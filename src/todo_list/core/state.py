# src/todo_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings or any object with the same attributes (tests use SimpleNamespace).
    settings: Any

    task_store: TaskRepo
