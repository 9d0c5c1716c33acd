"""Wall-clock access in the club's business timezone."""

from __future__ import annotations
from tracking import t

from datetime import date, datetime
from typing import Callable, Optional

import pytz

from infrastructure.constants import BUSINESS_TIMEZONE


class BusinessClock:
    """Timezone-aware "now" and "today" for operating-hour decisions.

    Client locale never matters: every value is produced directly in the
    configured business timezone.
    """

    def __init__(
        self,
        timezone_name: str = BUSINESS_TIMEZONE,
        *,
        now_provider: Optional[Callable[[], datetime]] = None,
    ) -> None:
        t('monitoring.business_clock.BusinessClock.__init__')
        self.timezone = pytz.timezone(timezone_name)
        self._now_provider = now_provider

    @property
    def timezone_name(self) -> str:
        return self.timezone.zone

    def localize(self, value: datetime) -> datetime:
        """Interpret naive datetimes as business time and convert aware ones."""
        t('monitoring.business_clock.BusinessClock.localize')
        if value.tzinfo is None:
            return self.timezone.localize(value)
        return value.astimezone(self.timezone)

    def now(self) -> datetime:
        t('monitoring.business_clock.BusinessClock.now')
        if self._now_provider is not None:
            return self.localize(self._now_provider())
        return datetime.now(self.timezone)

    def today(self) -> date:
        t('monitoring.business_clock.BusinessClock.today')
        return self.now().date()

    def today_string(self) -> str:
        """Today's date as ``YYYY-MM-DD`` in the business timezone."""
        t('monitoring.business_clock.BusinessClock.today_string')
        return self.today().strftime("%Y-%m-%d")


__all__ = ["BusinessClock"]
