# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the task store into AppState and fills it from the task file,
- persists the task file on exit.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings and load saved tasks.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = AppState(settings=settings, task_store=TaskStore())
    load_tasks(state)
    return state


def load_tasks(state: AppState) -> int:
    path = Path(state.settings.tasks_path)
    loaded = state.task_store.load(path)
    logger.info("Task list ready: %d tasks from %s", state.task_store.count_tasks(), path)
    return loaded


def save_tasks(state: AppState) -> None:
    """Write the whole task list to settings.tasks_path. OSError propagates."""
    path = Path(state.settings.tasks_path)
    try:
        state.task_store.save(path)
    except OSError as e:
        logger.error("Failed to save tasks to %s: %s", path, e)
        raise
