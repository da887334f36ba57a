# src/ticker_task/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the host process.
- The core (TickerTask) never reads settings implicitly; hosts pass them in.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TICKER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _level(name: str, default: int) -> int:
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    file_log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Failure reporting ----
    report_failures: bool

    def console_level(self) -> int:
        return _level(self.log_level, logging.INFO)

    def file_level(self) -> int:
        return _level(self.file_log_level, logging.DEBUG)

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "ticker").strip() or "ticker"

        return Settings(
            app_name=app_name,
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            file_log_level=_env(_k("FILE_LOG_LEVEL"), "DEBUG"),
            log_dir=_env_path(_k("LOG_DIR"), Path(".local") / app_name),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            report_failures=_env_bool(_k("REPORT_FAILURES"), True),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
