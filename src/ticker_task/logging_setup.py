# src/ticker_task/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .config import Settings

LOG_FILE_NAME = "ticker.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable for hosts running many tasks:
    - allow all ticker_task logs
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - any other 3rd party only at WARNING+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "ticker_task" or name.startswith("ticker_task."):
            return True

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.WARNING


def setup_logging(
    *,
    log_dir: str | Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path | None:
    """
    Configure logging with:
    - Console handler: readable + filtered
    - File handler (only when log_dir is given): full logs for debugging

    Call this ONCE, from the host, before starting tasks. Returns the log file path, if any.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    log_file: Path | None = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
    return log_file


def setup_logging_from_settings(settings: Settings) -> Path | None:
    return setup_logging(
        log_dir=settings.log_dir if settings.log_to_file else None,
        console_level=settings.console_level(),
        file_level=settings.file_level(),
    )
