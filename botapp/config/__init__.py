"""Structured configuration loaders for the Telegram bot runtime."""

from __future__ import annotations
from tracking import t

from dataclasses import dataclass
from typing import Optional

from infrastructure.settings import AppSettings, get_settings


@dataclass(frozen=True)
class TelegramConfig:
    """Telegram-specific settings for the bot runtime."""

    token: str
    production_mode: bool


@dataclass(frozen=True)
class CourtApiConfig:
    """Where and as whom reservations are fetched."""

    api_url: str
    club_id: str
    api_token: str
    timeout_seconds: float


@dataclass(frozen=True)
class StatusConfig:
    """Business time and refresh parameters for court status."""

    timezone: str
    open_hour: int
    close_hour: int
    poll_interval_seconds: int


@dataclass(frozen=True)
class PathsConfig:
    """File-system locations for persisted state."""

    data_directory: str
    subscribers_file: str


@dataclass(frozen=True)
class BotAppConfig:
    """Aggregated configuration snapshot for the Telegram bot."""

    telegram: TelegramConfig
    court_api: CourtApiConfig
    status: StatusConfig
    paths: PathsConfig

    @property
    def timezone(self) -> str:
        return self.status.timezone

    @property
    def poll_interval(self) -> int:
        return self.status.poll_interval_seconds


def _build_config_from_settings(settings: AppSettings) -> BotAppConfig:
    """Translate :class:`AppSettings` values into runtime config objects."""
    t('botapp.config._build_config_from_settings')

    return BotAppConfig(
        telegram=TelegramConfig(
            token=settings.bot_token,
            production_mode=settings.production_mode,
        ),
        court_api=CourtApiConfig(
            api_url=settings.api_url,
            club_id=settings.club_id,
            api_token=settings.api_token,
            timeout_seconds=settings.api_timeout_seconds,
        ),
        status=StatusConfig(
            timezone=settings.timezone,
            open_hour=settings.open_hour,
            close_hour=settings.close_hour,
            poll_interval_seconds=settings.poll_interval_seconds,
        ),
        paths=PathsConfig(
            data_directory=settings.data_directory,
            subscribers_file=settings.subscribers_file,
        ),
    )


def load_bot_config(settings: Optional[AppSettings] = None) -> BotAppConfig:
    """Load the Telegram bot configuration from shared application settings."""
    t('botapp.config.load_bot_config')

    if settings is None:
        settings = get_settings()
    return _build_config_from_settings(settings)


__all__ = [
    'BotAppConfig',
    'CourtApiConfig',
    'PathsConfig',
    'StatusConfig',
    'TelegramConfig',
    'load_bot_config',
]
