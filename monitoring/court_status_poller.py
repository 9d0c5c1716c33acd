"""Periodic court status refresh around ``compute_status``."""

from __future__ import annotations
from tracking import t

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, List, Optional, Union

from infrastructure.constants import DEFAULT_POLL_INTERVAL_SECONDS
from monitoring.business_clock import BusinessClock
from monitoring.court_status import (
    DerivedStatus,
    OperatingHours,
    compute_status,
    empty_status,
    unavailable_status,
)
from reservations.services.reservation_client import ReservationFetchError

StatusListener = Callable[[DerivedStatus], Union[None, Awaitable[None]]]


class CourtStatusPoller:
    """Owns the refresh timer and the last computed ``DerivedStatus``.

    Refreshes may overlap (a manual refresh while a timed one is in flight).
    Each refresh is tagged with an increasing sequence number and a result
    older than the one already applied is discarded, so the cached status
    always reflects the most recently *issued* request.
    """

    def __init__(
        self,
        client,
        clock: Optional[BusinessClock] = None,
        *,
        hours: Optional[OperatingHours] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        t('monitoring.court_status_poller.CourtStatusPoller.__init__')
        if poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {poll_interval}")
        self.client = client
        self.clock = clock or BusinessClock()
        self.hours = hours or OperatingHours()
        self.poll_interval = poll_interval
        self.logger = logger or logging.getLogger('CourtStatusPoller')

        self._status: Optional[DerivedStatus] = None
        self._listeners: List[StatusListener] = []
        self._task: Optional[asyncio.Task] = None
        self._issued_sequence = 0
        self._applied_sequence = 0
        self._in_flight = 0
        self.last_error: Optional[BaseException] = None

    @property
    def status(self) -> Optional[DerivedStatus]:
        return self._status

    @property
    def is_loading(self) -> bool:
        return self._in_flight > 0

    @property
    def is_polling(self) -> bool:
        return self._task is not None and not self._task.done()

    def subscribe(self, listener: StatusListener) -> Callable[[], None]:
        """Register a listener for changed statuses; returns an unsubscribe callable."""
        t('monitoring.court_status_poller.CourtStatusPoller.subscribe')
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def get_current_status(self) -> DerivedStatus:
        """Return the cached status, fetching it the first time."""
        t('monitoring.court_status_poller.CourtStatusPoller.get_current_status')
        if self._status is None:
            return await self.refresh()
        return self._status

    async def refresh(self) -> DerivedStatus:
        """Run one fetch/derive cycle and publish the result if it changed."""
        t('monitoring.court_status_poller.CourtStatusPoller.refresh')
        self._issued_sequence += 1
        sequence = self._issued_sequence

        self._in_flight += 1
        try:
            status = await self._fetch_and_derive()
        finally:
            self._in_flight -= 1

        if sequence < self._applied_sequence:
            self.logger.debug(
                "Discarding stale court status #%s (already applied #%s)",
                sequence,
                self._applied_sequence,
            )
            return status

        self._applied_sequence = sequence
        changed = not status.same_as(self._status)
        self._status = status

        if changed:
            self.logger.info(
                "Court status changed: %s (current=%s, next=%s)",
                status.facility_status.value,
                status.current.time_range,
                status.next.time_range,
            )
            await self._notify(status)
        return status

    async def start_polling(self) -> None:
        """Refresh now and then every ``poll_interval`` seconds."""
        t('monitoring.court_status_poller.CourtStatusPoller.start_polling')
        if self.is_polling:
            return

        await self.refresh()
        self._task = asyncio.create_task(self._poll_loop())
        self.logger.info("Court status polling started (%ss interval)", self.poll_interval)

    async def stop_polling(self) -> None:
        t('monitoring.court_status_poller.CourtStatusPoller.stop_polling')
        task = self._task
        self._task = None
        if task is None:
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        self.logger.info("Court status polling stopped")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    async def _poll_loop(self) -> None:
        t('monitoring.court_status_poller.CourtStatusPoller._poll_loop')
        while True:
            await asyncio.sleep(self.poll_interval)
            await self.refresh()

    async def _fetch_and_derive(self) -> DerivedStatus:
        t('monitoring.court_status_poller.CourtStatusPoller._fetch_and_derive')
        if not self.client.has_club_selected:
            self.logger.debug("No club selected; skipping reservation fetch")
            return empty_status(self.clock.now())

        today = self.clock.today()
        try:
            reservations = await self.client.get_reservations_for_date(today)
        except ReservationFetchError as exc:
            self.last_error = exc
            self.logger.error("Court status fetch failed: %s", exc)
            return unavailable_status(self.clock.now())
        except Exception as exc:  # pragma: no cover - defensive guard
            self.last_error = exc
            self.logger.error("Unexpected error fetching court status: %s", exc, exc_info=True)
            return unavailable_status(self.clock.now())

        self.last_error = None
        now = self.clock.now()
        self.logger.debug(
            "Deriving court status at %s from %s reservations",
            now.strftime("%Y-%m-%d %H:%M %Z"),
            len(reservations),
        )
        return compute_status(reservations, now, hours=self.hours, clock=self.clock.now)

    async def _notify(self, status: DerivedStatus) -> None:
        t('monitoring.court_status_poller.CourtStatusPoller._notify')
        for listener in list(self._listeners):
            try:
                result: Any = listener(status)
                if inspect.isawaitable(result):
                    await result
            except Exception as exc:
                self.logger.error("Court status listener %r failed: %s", listener, exc, exc_info=True)

    async def __aenter__(self) -> "CourtStatusPoller":
        await self.start_polling()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop_polling()


__all__ = ["CourtStatusPoller", "StatusListener"]
