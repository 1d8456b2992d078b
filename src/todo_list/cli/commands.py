# src/todo_list/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..cli.bootstrap import save_tasks
from ..core.ports import Console
from ..core.state import AppState
from ..tasks.task_models import TaskError, parse_task_id

# Returns False when the menu loop should stop.
MenuHandler = Callable[[AppState, Console], bool]

MENU_TITLE = "Todo List Application"

logger = logging.getLogger(__name__)


class MenuRegistry:
    """Numbered menu options used by the console loop (1 -> add, 2 -> view, ...)."""

    def __init__(self, title: str = MENU_TITLE) -> None:
        self.title = title
        self._handlers: dict[str, MenuHandler] = {}
        self._labels: dict[str, str] = {}

    def register(self, key: str, handler: MenuHandler, label: str) -> None:
        self._handlers[key] = handler
        self._labels[key] = label

    def handle(self, state: AppState, choice: str, console: Console) -> bool:
        """
        Run the option matching `choice` exactly.
        Returns False if the loop should stop, True otherwise.
        """
        handler = self._handlers.get(choice)
        if handler is None:
            console.write("Invalid option. Try again.")
            return True
        return handler(state, console)

    def build_menu(self) -> str:
        lines = [self.title]
        for key, label in self._labels.items():
            lines.append(f"{key}. {label}")
        return "\n".join(lines)


registry = MenuRegistry()


def _print_tasks(console: Console, tasks: Iterable[object]) -> None:
    printed = False
    for task in tasks:
        console.write(str(task))
        printed = True
    if not printed:
        console.write("No tasks.")


def _read_task_id(console: Console, prompt: str) -> int | None:
    return parse_task_id(console.read_line(prompt))


def cmd_add(state: AppState, console: Console) -> bool:
    title = console.read_line("Enter task title: ")
    description = console.read_line("Enter task description: ")
    try:
        task_id = state.task_store.add(title, description)
    except TaskError as e:
        console.write(f"Error adding task: {e}")
        return True
    console.write(f"Task added successfully (ID: {task_id}).")
    return True


def cmd_view(state: AppState, console: Console) -> bool:
    console.write("All Tasks:")
    _print_tasks(console, state.task_store.list_all())
    return True


def cmd_complete(state: AppState, console: Console) -> bool:
    task_id = _read_task_id(console, "Enter task ID to mark as completed: ")
    if task_id is None:
        console.write("Invalid task ID.")
        return True
    try:
        state.task_store.complete(task_id)
    except TaskError as e:
        console.write(f"Error marking task as completed: {e}")
        return True
    console.write("Task marked as completed.")
    return True


def cmd_delete(state: AppState, console: Console) -> bool:
    task_id = _read_task_id(console, "Enter task ID to delete: ")
    if task_id is None:
        console.write("Invalid task ID.")
        return True
    try:
        state.task_store.delete(task_id)
    except TaskError as e:
        console.write(f"Error deleting task: {e}")
        return True
    console.write("Task deleted successfully.")
    return True


def cmd_filter(state: AppState, console: Console) -> bool:
    """
    Sub-menu:
      1 -> all tasks
      2 -> completed tasks
      3 -> incomplete tasks
    """
    console.write("Filter tasks by status:")
    console.write("1. All tasks")
    console.write("2. Completed tasks")
    console.write("3. Incomplete tasks")
    option = console.read_line("Select an option: ")

    store = state.task_store
    if option == "1":
        tasks = store.list_all()
    elif option == "2":
        tasks = store.list_by_status(True)
    elif option == "3":
        tasks = store.list_by_status(False)
    else:
        console.write("Invalid option.")
        return True

    _print_tasks(console, tasks)
    return True


def cmd_save_and_exit(state: AppState, console: Console) -> bool:
    try:
        save_tasks(state)
    except OSError as e:
        # Nothing was persisted; keep the loop running.
        console.write(f"Error saving tasks: {e}")
        return True
    console.write("Tasks saved.")
    return False


registry.register("1", cmd_add, label="Add new task")
registry.register("2", cmd_view, label="View all tasks")
registry.register("3", cmd_complete, label="Mark task as completed")
registry.register("4", cmd_delete, label="Delete a task")
registry.register("5", cmd_filter, label="Filter tasks by status")
registry.register("6", cmd_save_and_exit, label="Save and Exit")
