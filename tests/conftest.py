# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from ticker_task.config import Settings

from .fakes import CountingWork, ManualTickSource, RecordingReporter


@pytest.fixture()
def source() -> ManualTickSource:
    return ManualTickSource()


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture()
def work() -> CountingWork:
    return CountingWork()


@pytest.fixture()
def make_settings(tmp_path: Path) -> Callable[..., Settings]:
    """
    Build Settings directly instead of reading the environment,
    to keep unit tests isolated and deterministic.
    """

    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = dict(
            app_name="ticker-test",
            log_level="INFO",
            file_log_level="DEBUG",
            log_dir=tmp_path / "logs",
            log_to_file=True,
            report_failures=True,
        )
        values.update(overrides)
        return Settings(**values)

    return _make
