# tests/test_bootstrap.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist.cli import main as cli_main
from tasklist.cli.bootstrap import create_initial_state
from tasklist.config import Settings
from tasklist.tasks.task_store import TaskStore

from .fakes import ScriptedInput


def test_create_initial_state_owns_fresh_store(settings) -> None:
    first = create_initial_state(settings=settings)
    second = create_initial_state(settings=settings)

    assert settings.data_dir.is_dir()
    assert isinstance(first.task_store, TaskStore)
    assert first.task_store is not second.task_store
    assert first.task_store.list_tasks() == ()


def _settings(tmp_path: Path, *, console_enabled: bool) -> Settings:
    return Settings(
        app_name="tasklist-test",
        log_level="warning",
        data_dir=tmp_path / "data",
        console_enabled=console_enabled,
        list_title="My Tasks",
        empty_text="Nothing to show yet.",
        show_ids=False,
    )


def test_main_runs_console(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(cli_main, "get_settings", lambda: _settings(tmp_path, console_enabled=True))
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kw: calls.append(kw))
    monkeypatch.setattr("builtins.input", ScriptedInput(["/add Buy milk | 2%", "/quit"]))

    cli_main.main()

    assert calls == [{"log_dir": tmp_path / "data", "console_level": 30}]
    assert "Added: Buy milk" in capsys.readouterr().out


def test_main_with_console_disabled(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(cli_main, "get_settings", lambda: _settings(tmp_path, console_enabled=False))
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kw: None)

    def no_input(prompt: str = "") -> str:
        raise AssertionError("console should not run")

    monkeypatch.setattr("builtins.input", no_input)

    cli_main.main()

    assert capsys.readouterr().out == ""
