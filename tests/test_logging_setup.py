# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from todo_list.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_mutes_third_party() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("todo_list.tasks.task_store", logging.INFO))
    assert f.filter(_record("todo_list", logging.DEBUG))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("todo_listing", logging.INFO))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)

    logging.getLogger("todo_list.test").debug("hello from the test")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file == tmp_path / "logs" / "todo_list.log"
    assert "hello from the test" in log_file.read_text("utf-8")

    # Calling again does not stack handlers.
    first = list(logging.getLogger().handlers)
    setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)
    for h in first:
        h.close()
    assert len(logging.getLogger().handlers) == 2
