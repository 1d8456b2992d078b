# tests/test_main.py

from __future__ import annotations

import pytest

from todo_list.cli import main as main_mod
from todo_list.cli.bootstrap import create_initial_state


@pytest.fixture()
def scripted_input(monkeypatch: pytest.MonkeyPatch, settings):
    monkeypatch.setattr(main_mod, "get_settings", lambda: settings)
    monkeypatch.setattr(main_mod, "setup_logging", lambda **_: None)

    def feed(lines: list[str]) -> None:
        it = iter(lines)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return feed


def test_main_persists_between_runs(scripted_input, settings, capsys) -> None:
    scripted_input(["1", "Buy milk", "2% milk", "6"])
    assert main_mod.main() == 0
    assert settings.tasks_path.read_text("utf-8") == "1,Buy milk,2% milk,False\n"

    scripted_input(["1", "Pay bills", "", "4", "1", "6"])
    assert main_mod.main() == 0
    assert settings.tasks_path.read_text("utf-8") == "2,Pay bills,,False\n"

    out = capsys.readouterr().out
    assert "Task added successfully (ID: 2)." in out
    assert "Tasks saved." in out


def test_bootstrap_loads_tasks_and_restores_counter(settings) -> None:
    settings.tasks_path.write_text("4,Old,,True\nbroken line\n", "utf-8")

    state = create_initial_state(settings=settings)
    assert [t.id for t in state.task_store.list_all()] == [4]
    assert state.task_store.add("New", "") == 5
    assert settings.data_dir.is_dir()


def test_main_survives_undecodable_task_file(scripted_input, settings) -> None:
    settings.tasks_path.write_bytes(b"1,bad\xff,,False\n2,good,,True\n")
    scripted_input(["6"])

    assert main_mod.main() == 0
    assert settings.tasks_path.read_text("utf-8") == "2,good,,True\n"
