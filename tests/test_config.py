# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist.config import Settings

_VARS = (
    "TASKLIST_APP_NAME",
    "TASKLIST_LOG_LEVEL",
    "TASKLIST_LOG_DIR",
    "TASKLIST_LOG_TO_FILE",
    "TASKLIST_PROMPT",
    "TASKLIST_QUIT_COMMAND",
    "TASKLIST_RESET_EXISTING_PROJECTS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_from_empty_env() -> None:
    s = Settings.from_env()
    assert s.app_name == "tasklist"
    assert s.log_level == "WARNING"
    assert s.log_dir == Path(".local/tasklist")
    assert s.log_to_file is False
    assert s.prompt == "> "
    assert s.quit_command == "quit"
    assert s.reset_existing_projects is False


def test_values_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKLIST_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("TASKLIST_LOG_TO_FILE", "yes")
    monkeypatch.setenv("TASKLIST_PROMPT", "$ ")
    monkeypatch.setenv("TASKLIST_QUIT_COMMAND", " exit ")
    monkeypatch.setenv("TASKLIST_RESET_EXISTING_PROJECTS", "1")

    s = Settings.from_env()
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path
    assert s.log_to_file is True
    assert s.prompt == "$ "
    assert s.quit_command == "exit"
    assert s.reset_existing_projects is True


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.setenv(name, "")

    s = Settings.from_env()
    assert s.app_name == "tasklist"
    assert s.log_level == "WARNING"
    assert s.quit_command == "quit"
    assert s.prompt == "> "
    assert s.log_to_file is False
