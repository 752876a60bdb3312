"""
Centralised config for the appointment booking mapping layer.

Settings are loaded from environment variables (and an optional ``.env``
file) and exposed through a singleton `settings` object.
"""

import os
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILE = Path(__file__).resolve()


def _discover_project_root(config_file: Path) -> tuple[Path, Path]:
    """Return a project root and env file path without assuming ``.env`` exists.

    Walk the parents looking for a ``.env`` file and fall back to the
    repository root (detected via common project markers) when it is missing.
    """

    parents = list(config_file.parents)

    for parent in parents:
        env_file = parent / ".env"
        if env_file.exists():
            return parent, env_file

    for marker in ("pyproject.toml", ".git"):
        for parent in parents:
            if (parent / marker).exists():
                return parent, parent / ".env"

    fallback_root = parents[1] if len(parents) > 1 else parents[0]
    return fallback_root, fallback_root / ".env"


PROJECT_ROOT, ENV_FILE_PATH = _discover_project_root(CONFIG_FILE)


T = TypeVar("T")


class Settings(BaseSettings):
    """
    Centralised and validated application settings.
    """
    model_config = SettingsConfigDict(
        env_file=ENV_FILE_PATH, env_file_encoding="utf-8", extra="ignore", case_sensitive=False
    )

    # --- LOGGING ---
    APP_LOG_LEVEL: str = "INFO"
    APP_LOG_TO_CONSOLE: bool = True
    APP_LOG_DIR: Optional[Path] = None

    # --- DATE HANDLING ---
    # Zone used for booking requests that carry a naive wall-clock time.
    DEFAULT_TIMEZONE: str = "UTC"

    @field_validator("DEFAULT_TIMEZONE")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone '{value}'") from exc
        return value

    @property
    def timezone(self) -> ZoneInfo:
        return ZoneInfo(self.DEFAULT_TIMEZONE)

    # --- DYNAMIC FILE PATHS ---
    @property
    def log_path(self) -> Path:
        """
        Path for the main application log file.

        Uses ``APP_LOG_DIR`` when it is set and writable, otherwise falls back
        to a directory under the user's home.
        """
        if self.APP_LOG_DIR is not None:
            log_dir = Path(self.APP_LOG_DIR)
            if log_dir.exists() and os.access(log_dir, os.W_OK):
                return log_dir / "appointment_booking.log"
        fallback_dir = Path.home() / "appointment_booking_logs"
        return fallback_dir / "appointment_booking.log"


# Create a single, importable instance of the settings for the entire application.
settings = Settings()


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _coerce_type(raw: str, template: Any) -> Any:
    if isinstance(template, bool):
        return _to_bool(raw)
    if isinstance(template, int) and not isinstance(template, bool):
        return int(raw)
    if isinstance(template, float):
        return float(raw)
    if isinstance(template, Path):
        return Path(raw)
    return raw


def get_env(
    name: str,
    default: T | None = None,
    *,
    parser: Callable[[str], T] | None = None,
) -> T | Any | None:
    """Return a configuration value resolving environment overrides consistently.

    The resolution order is:

    1. Explicit environment variable overrides at runtime.
    2. Typed values provided by the Pydantic ``settings`` object.
    3. The supplied ``default`` value.

    When an override is read directly from :mod:`os.environ`, ``parser`` (or the
    inferred type from ``settings``) is used to coerce the string into the
    expected type.
    """

    if name in os.environ:
        raw_value = os.environ[name]
        if parser is not None:
            return parser(raw_value)
        if hasattr(settings, name):
            template = getattr(settings, name)
            try:
                return _coerce_type(raw_value, template)
            except (TypeError, ValueError):
                return template
        return raw_value

    if hasattr(settings, name):
        value = getattr(settings, name)
        return default if value is None else value

    return default
