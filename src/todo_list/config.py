# src/todo_list/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default, so the app runs with no configuration at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# A local .env never overrides variables that are already set.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Persistence ----
    tasks_path: Path

    # ---- Console behaviour ----
    clear_screen: bool
    pause_after_action: bool

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "todo-list"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper(),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/todo_list")),
            tasks_path=_env_path(_k("TASKS_PATH"), Path("tasks.txt")),
            clear_screen=_env_bool(_k("CLEAR_SCREEN"), True),
            pause_after_action=_env_bool(_k("PAUSE_AFTER_ACTION"), True),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Build settings on first use and return the same object afterwards."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
