# src/todo_list/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import save_tasks
from ..cli.commands import MenuRegistry
from ..cli.commands import registry as menu_registry
from ..core.ports import Console
from ..core.state import AppState

logger = logging.getLogger(__name__)

CLEAR_SEQUENCE = "\033[H\033[2J"


class TerminalConsole:
    """Console port backed by input()/print()."""

    def read_line(self, prompt: str = "") -> str:
        return input(prompt)

    def write(self, text: str = "") -> None:
        print(text, flush=True)

    def clear(self) -> None:
        """Best-effort: only clear a real terminal, never a pipe or a file."""
        try:
            if sys.stdout.isatty():
                sys.stdout.write(CLEAR_SEQUENCE)
                sys.stdout.flush()
        except (OSError, ValueError):
            logger.debug("Screen clear failed.", exc_info=True)


def _save_on_close(state: AppState, console: Console) -> bool:
    try:
        save_tasks(state)
    except OSError as e:
        console.write(f"Error saving tasks: {e}")
        return False
    console.write("Tasks saved.")
    return True


def run_console_loop(
    state: AppState,
    console: Console | None = None,
    menu: MenuRegistry | None = None,
) -> bool:
    """
    Show the menu until the user picks "Save and Exit" or input ends.

    End of input and Ctrl+C are treated as "Save and Exit".
    Returns True if the session ended with the task list saved.
    """
    console = console or TerminalConsole()
    menu = menu or menu_registry

    settings = state.settings
    clear_screen = bool(getattr(settings, "clear_screen", True))
    pause_after_action = bool(getattr(settings, "pause_after_action", True))

    logger.info("Console menu started (tasks=%s).", state.task_store.count_tasks())

    while True:
        try:
            if clear_screen:
                console.clear()
            console.write(menu.build_menu())
            choice = console.read_line("Select an option: ")

            try:
                keep_running = menu.handle(state, choice, console)
            except (EOFError, KeyboardInterrupt):
                raise
            except Exception:
                logger.exception("Menu option %r crashed.", choice)
                console.write("Internal error while handling a menu option.")
                keep_running = True

            if not keep_running:
                logger.info("Console menu finished.")
                return True

            if pause_after_action:
                console.read_line("Press Enter to continue...")

        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed, saving and exiting.")
            console.write()
            return _save_on_close(state, console)
