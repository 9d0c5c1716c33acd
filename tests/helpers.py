"""Shared fakes and utilities for unit tests."""

from __future__ import annotations
from tracking import t

from datetime import datetime
from typing import Any, Dict, List, Tuple

from monitoring.business_clock import BusinessClock
from reservations.models import ReservationRecord


class DummyLogger:
    """Lightweight stand-in for ``logging.Logger`` that records calls."""

    def __init__(self) -> None:
        t('tests.helpers.DummyLogger.__init__')
        self.records: List[Tuple[str, Tuple[Any, ...], Dict[str, Any]]] = []
        # ``entries`` is kept for compatibility with existing assertions.
        self.entries = self.records

    def _record(self, level: str, *args: Any, **kwargs: Any) -> None:
        t('tests.helpers.DummyLogger._record')
        self.records.append((level, args, kwargs))

    def debug(self, *args: Any, **kwargs: Any) -> None:
        t('tests.helpers.DummyLogger.debug')
        self._record("debug", *args, **kwargs)

    def info(self, *args: Any, **kwargs: Any) -> None:
        t('tests.helpers.DummyLogger.info')
        self._record("info", *args, **kwargs)

    def warning(self, *args: Any, **kwargs: Any) -> None:
        t('tests.helpers.DummyLogger.warning')
        self._record("warning", *args, **kwargs)

    def error(self, *args: Any, **kwargs: Any) -> None:
        t('tests.helpers.DummyLogger.error')
        self._record("error", *args, **kwargs)

    def critical(self, *args: Any, **kwargs: Any) -> None:
        t('tests.helpers.DummyLogger.critical')
        self._record("critical", *args, **kwargs)

    def exception(self, *args: Any, **kwargs: Any) -> None:
        t('tests.helpers.DummyLogger.exception')
        self._record("exception", *args, **kwargs)

    @property
    def messages(self) -> List[Tuple[str, Any]]:
        """Return formatted messages for quick assertions."""
        t('tests.helpers.DummyLogger.messages')

        formatted: List[Tuple[str, Any]] = []
        for level, args, kwargs in self.records:
            message: Any = kwargs.get("msg")
            if args:
                template = args[0]
                if isinstance(template, str) and len(args) > 1:
                    try:
                        message = template % args[1:]
                    except (TypeError, ValueError):
                        message = template
                else:
                    message = template
            formatted.append((level, message))
        return formatted

    def clear(self) -> None:
        t('tests.helpers.DummyLogger.clear')
        self.records.clear()

    def last(self, level: str | None = None) -> Tuple[str, Tuple[Any, ...], Dict[str, Any]] | None:
        """Return the most recent record, optionally filtered by level."""
        t('tests.helpers.DummyLogger.last')

        if not self.records:
            return None
        if level is None:
            return self.records[-1]
        for entry in reversed(self.records):
            if entry[0] == level:
                return entry
        return None


class FakeReservationClient:
    """In-memory stand-in for ``ReservationApiClient``.

    ``responses`` are consumed in order; an exception instance is raised
    instead of returned. The last response repeats once the list is exhausted.
    """

    def __init__(self, responses: List[Any] | None = None, *, club_id: str = "club-1") -> None:
        t('tests.helpers.FakeReservationClient.__init__')
        self.responses = list(responses or [[]])
        self.club_id = club_id
        self.requested_dates: List[Any] = []
        self.closed = False

    @property
    def has_club_selected(self) -> bool:
        return bool(self.club_id)

    async def get_reservations_for_date(self, day: Any) -> Any:
        t('tests.helpers.FakeReservationClient.get_reservations_for_date')
        self.requested_dates.append(day)
        index = min(len(self.requested_dates) - 1, len(self.responses) - 1)
        response = self.responses[index]
        if isinstance(response, BaseException):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


def fixed_clock(year: int = 2025, month: int = 3, day: int = 14, hour: int = 10, minute: int = 30):
    """Return a ``BusinessClock`` frozen at the given Asia/Manila wall time."""
    t('tests.helpers.fixed_clock')
    moment = datetime(year, month, day, hour, minute)
    return BusinessClock("Asia/Manila", now_provider=lambda: moment)


def make_reservation(
    time_slot: int,
    end_time_slot: int | None = None,
    *,
    reservation_id: str | None = None,
    status: str = "confirmed",
    players: Tuple[Any, ...] = (),
    block_reason: str | None = None,
    block_notes: str | None = None,
):
    """Build a ``ReservationRecord`` for 2025-03-14 with sensible defaults."""
    t('tests.helpers.make_reservation')
    return ReservationRecord(
        id=reservation_id or f"res-{time_slot}",
        date="2025-03-14",
        time_slot=time_slot,
        end_time_slot=end_time_slot if end_time_slot is not None else time_slot + 1,
        status=status,
        players=tuple(players),
        block_reason=block_reason,
        block_notes=block_notes,
    )
