"""Centralized application settings.

All runtime configuration is read here from the environment (and a local
``.env`` file during development). Other modules receive an
:class:`AppSettings` snapshot instead of calling ``os.getenv`` themselves.
"""

from __future__ import annotations
from tracking import t

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from dotenv import load_dotenv

from . import constants


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    """Normalize environment strings such as "true"/"1" into booleans."""
    t('infrastructure.settings._to_bool')

    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _to_int(value: Optional[str], default: int) -> int:
    t('infrastructure.settings._to_int')
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _to_positive_int(value: Optional[str], default: int) -> int:
    """Like ``_to_int`` but zero and negative values fall back to ``default``."""
    t('infrastructure.settings._to_positive_int')
    parsed = _to_int(value, default)
    return parsed if parsed > 0 else default


def _to_float(value: Optional[str], default: float) -> float:
    t('infrastructure.settings._to_float')
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class AppSettings:
    """Immutable snapshot of high-level configuration values."""

    bot_token: str
    production_mode: bool
    api_url: str
    club_id: str
    api_token: str
    timezone: str
    open_hour: int
    close_hour: int
    poll_interval_seconds: int
    api_timeout_seconds: float
    subscribers_file: str
    data_directory: str


def load_settings(env: Optional[Mapping[str, str]] = None) -> AppSettings:
    """Load configuration from the environment and fall back to defaults."""
    t('infrastructure.settings.load_settings')

    if env is None:
        load_dotenv(override=False)
        env = os.environ

    data_directory = env.get("DATA_DIRECTORY", "data")

    return AppSettings(
        bot_token=env.get("TELEGRAM_BOT_TOKEN", ""),
        production_mode=_to_bool(env.get("PRODUCTION_MODE", "false")),
        api_url=env.get("COURT_API_URL", constants.DEFAULT_API_URL).rstrip("/"),
        club_id=env.get("COURT_CLUB_ID", "").strip(),
        api_token=env.get("COURT_API_TOKEN", "").strip(),
        timezone=env.get("BUSINESS_TIMEZONE", constants.BUSINESS_TIMEZONE),
        open_hour=_to_int(env.get("COURT_OPEN_HOUR"), constants.COURT_OPEN_HOUR),
        close_hour=_to_int(env.get("COURT_CLOSE_HOUR"), constants.COURT_CLOSE_HOUR),
        poll_interval_seconds=_to_positive_int(
            env.get("STATUS_POLL_INTERVAL"), constants.DEFAULT_POLL_INTERVAL_SECONDS
        ),
        api_timeout_seconds=_to_float(
            env.get("API_TIMEOUT_SECONDS"), constants.DEFAULT_API_TIMEOUT_SECONDS
        ),
        subscribers_file=env.get(
            "SUBSCRIBERS_FILE", os.path.join(data_directory, "court_status_subscribers.json")
        ),
        data_directory=data_directory,
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached :class:`AppSettings` instance."""
    t('infrastructure.settings.get_settings')

    return load_settings()
