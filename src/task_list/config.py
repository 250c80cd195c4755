# src/task_list/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Everything has a default: a bare `task-list` works with no environment at all.
- Paths are resolved lazily against the user's home directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

ENV_PREFIX = "TASK_LIST"

DEFAULT_DATA_SUBDIR = Path(".local") / "share" / "task-list"
DEFAULT_FILE_NAME = "list"
DEFAULT_LOG_NAME = "task-list.log"


class ErrorPolicy(StrEnum):
    """What the command loop does when storage fails after startup."""

    EXIT = "exit"
    REPORT = "report"

    @classmethod
    def from_env(cls, raw: str | None) -> ErrorPolicy:
        if not raw:
            return cls.EXIT
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.EXIT


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv() -> None:
    """Load .env from the working directory; real env vars win."""
    load_dotenv(find_dotenv(usecwd=True), override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _home_dir() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as e:
        raise ConfigError(f"Cannot resolve home directory: {e}") from e


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Logging ----
    log_level: str
    log_file: Path | None

    # ---- Storage ----
    data_dir: Path
    tasks_path: Path

    # ---- Error handling ----
    on_storage_error: ErrorPolicy

    @staticmethod
    def from_env() -> Settings:
        _load_dotenv()

        raw_data_dir = os.getenv(_k("DATA_DIR"))
        if raw_data_dir is None or raw_data_dir.strip() == "":
            data_dir = _home_dir() / DEFAULT_DATA_SUBDIR
        else:
            data_dir = Path(raw_data_dir).expanduser()

        tasks_path = _env_path(_k("FILE"), data_dir / DEFAULT_FILE_NAME)

        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        # Empty string explicitly disables the file log.
        raw_log_file = os.getenv(_k("LOG_FILE"))
        if raw_log_file is None:
            log_file: Path | None = data_dir / DEFAULT_LOG_NAME
        elif raw_log_file.strip() == "":
            log_file = None
        else:
            log_file = Path(raw_log_file).expanduser()

        on_storage_error = ErrorPolicy.from_env(os.getenv(_k("ON_STORAGE_ERROR")))

        return Settings(
            log_level=log_level,
            log_file=log_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
            on_storage_error=on_storage_error,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def reset_settings() -> None:
    """Drop the cached Settings (tests / re-reading the environment)."""
    global _SETTINGS
    _SETTINGS = None
