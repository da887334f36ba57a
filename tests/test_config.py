# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from ticker_task import config
from ticker_task.config import Settings

_VARS = (
    "TICKER_APP_NAME",
    "TICKER_LOG_LEVEL",
    "TICKER_FILE_LOG_LEVEL",
    "TICKER_LOG_DIR",
    "TICKER_LOG_TO_FILE",
    "TICKER_REPORT_FAILURES",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so monkeypatch restores "unset" even if .env loading adds the var.
    for name in _VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(config, "_SETTINGS", None)


def test_defaults() -> None:
    s = Settings.from_env(load_env_file=False)

    assert s.app_name == "ticker"
    assert s.log_level == "INFO"
    assert s.log_dir == Path(".local") / "ticker"
    assert s.log_to_file is True
    assert s.report_failures is True
    assert s.console_level() == logging.INFO
    assert s.file_level() == logging.DEBUG


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TICKER_APP_NAME", "lobby")
    monkeypatch.setenv("TICKER_LOG_LEVEL", "warning")
    monkeypatch.setenv("TICKER_FILE_LOG_LEVEL", "INFO")
    monkeypatch.setenv("TICKER_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("TICKER_LOG_TO_FILE", "no")
    monkeypatch.setenv("TICKER_REPORT_FAILURES", "0")

    s = Settings.from_env(load_env_file=False)

    assert s.app_name == "lobby"
    assert s.console_level() == logging.WARNING
    assert s.file_level() == logging.INFO
    assert s.log_dir == tmp_path / "logs"
    assert s.log_to_file is False
    assert s.report_failures is False


def test_log_dir_follows_app_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICKER_APP_NAME", "arena")
    assert Settings.from_env(load_env_file=False).log_dir == Path(".local") / "arena"


def test_unknown_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICKER_LOG_LEVEL", "chatty")
    monkeypatch.setenv("TICKER_FILE_LOG_LEVEL", "")

    s = Settings.from_env(load_env_file=False)
    assert s.console_level() == logging.INFO
    assert s.file_level() == logging.DEBUG


def test_dotenv_is_loaded_from_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TICKER_APP_NAME=from-dotenv\nTICKER_REPORT_FAILURES=false\n", "utf-8")
    monkeypatch.chdir(tmp_path)

    s = Settings.from_env()
    assert s.app_name == "from-dotenv"
    assert s.report_failures is False


def test_dotenv_does_not_override_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TICKER_APP_NAME=from-dotenv\n", "utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TICKER_APP_NAME", "from-env")

    assert Settings.from_env().app_name == "from-env"


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TICKER_APP_NAME", "first")
    first = config.get_settings()

    monkeypatch.setenv("TICKER_APP_NAME", "second")
    assert config.get_settings() is first
    assert first.app_name == "first"
