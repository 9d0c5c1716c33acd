"""Async client for the club reservation API."""

from __future__ import annotations
from tracking import t

import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Union

import httpx

from infrastructure.constants import DEFAULT_API_TIMEOUT_SECONDS
from reservations.models import ReservationRecord
from reservations.services.response_normalizer import normalize_reservations_response


class ReservationFetchError(Exception):
    """Raised when reservations for a date cannot be retrieved."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class ClubContext:
    """Tenant scope applied to every reservation request."""

    club_id: str = ""
    auth_token: str = ""

    @property
    def has_club(self) -> bool:
        return bool(self.club_id)

    def headers(self) -> Dict[str, str]:
        """Authorization and club headers for the current context."""
        t('reservations.services.reservation_client.ClubContext.headers')
        headers: Dict[str, str] = {"Accept": "application/json"}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        if self.club_id:
            headers["X-Club-Id"] = self.club_id
        return headers


class ReservationApiClient:
    """Fetches a day's reservations for the selected club."""

    def __init__(
        self,
        base_url: str,
        *,
        club_context: Optional[ClubContext] = None,
        timeout_seconds: float = DEFAULT_API_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        t('reservations.services.reservation_client.ReservationApiClient.__init__')
        self.base_url = base_url.rstrip("/")
        self.club_context = club_context or ClubContext()
        self.timeout_seconds = timeout_seconds
        self.logger = logger or logging.getLogger('ReservationApiClient')
        self._client = httpx.AsyncClient(timeout=timeout_seconds, transport=transport)

    @property
    def has_club_selected(self) -> bool:
        t('reservations.services.reservation_client.ReservationApiClient.has_club_selected')
        return self.club_context.has_club

    def reservations_url(self, day: Union[date, str]) -> str:
        t('reservations.services.reservation_client.ReservationApiClient.reservations_url')
        day_str = day.strftime("%Y-%m-%d") if isinstance(day, date) else str(day)
        return f"{self.base_url}/reservations/date/{day_str}"

    async def get_reservations_for_date(self, day: Union[date, str]) -> List[ReservationRecord]:
        """Return every reservation (any status) for ``day``."""
        t('reservations.services.reservation_client.ReservationApiClient.get_reservations_for_date')

        url = self.reservations_url(day)
        self.logger.debug("Fetching reservations from %s", url)

        try:
            response = await self._client.get(url, headers=self.club_context.headers())
        except httpx.HTTPError as exc:
            raise ReservationFetchError(f"Request to {url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise ReservationFetchError(
                f"Reservation API returned {response.status_code} for {url}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ReservationFetchError(
                f"Reservation API returned a non-JSON body for {url}",
                status_code=response.status_code,
            ) from exc

        day_str = url.rsplit("/", 1)[-1]
        records = normalize_reservations_response(payload, date_hint=day_str)
        self.logger.debug("Processing %s reservations for %s", len(records), day_str)
        return records

    async def close(self) -> None:
        t('reservations.services.reservation_client.ReservationApiClient.close')
        await self._client.aclose()

    async def __aenter__(self) -> "ReservationApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


__all__ = ["ClubContext", "ReservationApiClient", "ReservationFetchError"]
