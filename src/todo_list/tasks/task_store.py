# src/todo_list/tasks/task_store.py

from __future__ import annotations

import logging
import os
from pathlib import Path

from .task_models import NotFoundError, Task, ValidationError, parse_task_id

logger = logging.getLogger(__name__)

FIELD_SEP = ","
FIELD_COUNT = 4


class TaskStore:
    """
    In-memory task list with flat-file persistence.

    Tasks are kept in insertion order and looked up by a linear scan.
    Ids come from a counter that only grows: a deleted id is never handed out again.

    File format (one task per line, no quoting/escaping):
        id,title,description,completed
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- low-level helpers ----

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    @staticmethod
    def _task_to_line(task: Task) -> str:
        return FIELD_SEP.join((str(task.id), task.title, task.description, str(task.completed)))

    @staticmethod
    def _parse_bool(raw: str) -> bool | None:
        val = raw.strip().lower()
        if val == "true":
            return True
        if val == "false":
            return False
        return None

    @classmethod
    def _line_to_task(cls, line: str) -> Task | None:
        """Parse one stored line. Returns None for anything malformed."""
        parts = line.split(FIELD_SEP)
        if len(parts) != FIELD_COUNT:
            return None

        raw_id, title, description, raw_completed = parts
        task_id = parse_task_id(raw_id)
        if task_id is None:
            return None

        completed = cls._parse_bool(raw_completed)
        if completed is None:
            return None

        try:
            return Task(id=task_id, title=title, description=description, completed=completed)
        except ValidationError:
            return None

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add(self, title: str, description: str) -> int:
        task = Task(id=self._next_id, title=title, description=description)
        self._tasks.append(task)
        self._next_id += 1
        logger.debug("Task added id=%s title=%r", task.id, task.title)
        return task.id

    def list_all(self) -> list[Task]:
        return list(self._tasks)

    def list_by_status(self, completed: bool) -> list[Task]:
        return [t for t in self._tasks if t.completed == completed]

    def get(self, task_id: int) -> Task:
        task = self._find(task_id)
        if task is None:
            raise NotFoundError("Task not found.")
        return task

    def complete(self, task_id: int) -> None:
        task = self.get(task_id)
        task.completed = True
        logger.debug("Task completed id=%s", task_id)

    def delete(self, task_id: int) -> None:
        task = self.get(task_id)
        self._tasks.remove(task)
        logger.debug("Task deleted id=%s", task_id)

    def save(self, path: str | Path) -> None:
        """
        Overwrite `path` with the current task list.

        Fields are written verbatim. A comma or line break inside a title or
        description will not survive a reload; such tasks are logged as warnings.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        lines: list[str] = []
        for task in self._tasks:
            for value in (task.title, task.description):
                if FIELD_SEP in value or "\n" in value or "\r" in value:
                    logger.warning(
                        "Task id=%s contains a delimiter or line break; it will not reload intact.",
                        task.id,
                    )
                    break
            lines.append(self._task_to_line(task) + "\n")

        tmp = path.with_name(path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8", newline="\n") as f:
                f.writelines(lines)
            os.replace(tmp, path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        logger.info("Saved %d tasks to %s", len(lines), path)

    def load(self, path: str | Path) -> int:
        """
        Append tasks stored in `path` and restore the id counter.

        A missing file is not an error. Malformed lines and lines whose id
        is already present are skipped. Returns the number of tasks loaded.
        """
        path = Path(path)
        if not path.exists():
            logger.info("No task file at %s; starting with an empty list.", path)
            return 0

        loaded = 0
        skipped = 0
        # Decoded per line: an undecodable line is skipped like any malformed one.
        with open(path, "rb") as f:
            for lineno, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8-sig").rstrip("\r\n")
                except UnicodeDecodeError:
                    skipped += 1
                    logger.debug("Skipping undecodable line %s:%d", path, lineno)
                    continue
                task = self._line_to_task(line)
                if task is None:
                    skipped += 1
                    logger.debug("Skipping malformed line %s:%d", path, lineno)
                    continue
                if self._find(task.id) is not None:
                    skipped += 1
                    logger.debug("Skipping duplicate id=%s at %s:%d", task.id, path, lineno)
                    continue

                self._tasks.append(task)
                self._next_id = max(self._next_id, task.id + 1)
                loaded += 1

        logger.info("Loaded %d tasks from %s (skipped=%d)", loaded, path, skipped)
        return loaded
