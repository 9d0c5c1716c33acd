"""Derive the court's current/next occupancy from today's reservations.

``compute_status`` is a pure function: given the day's reservation records
and the current business-timezone time it returns a ``DerivedStatus`` ready
for display. It performs no I/O and keeps no state between calls.
"""

from __future__ import annotations
from tracking import t

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

from infrastructure import constants
from reservations.models import PlayerEntry, ReservationRecord
from monitoring.slot_formatting import (
    format_hour,
    format_time_range,
    get_avatar_color,
    get_initials,
)


class FacilityStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    AVAILABLE = "available"


@dataclass(frozen=True)
class OperatingHours:
    """Half-open ``[open_hour, close_hour)`` business hours."""

    open_hour: int = constants.COURT_OPEN_HOUR
    close_hour: int = constants.COURT_CLOSE_HOUR

    def __post_init__(self) -> None:
        if not (0 <= self.open_hour < self.close_hour <= 24):
            raise ValueError(
                f"Operating hours must satisfy 0 <= open < close <= 24, "
                f"got open={self.open_hour} close={self.close_hour}"
            )

    def is_before_opening(self, hour: int) -> bool:
        return hour < self.open_hour

    def is_after_closing(self, hour: int) -> bool:
        return hour >= self.close_hour


@dataclass(frozen=True)
class PlayerDisplay:
    name: str
    is_guest: bool
    initials: str
    avatar_color: str


@dataclass(frozen=True)
class BlockInfo:
    reason: str
    notes: str


@dataclass(frozen=True)
class SlotInfo:
    """Display model for one slot (current or next)."""

    exists: bool
    time_range: str
    players: Tuple[PlayerDisplay, ...] = field(default_factory=tuple)
    is_blocked: bool = False
    block_info: Optional[BlockInfo] = None


@dataclass(frozen=True)
class DerivedStatus:
    """Presentation model recomputed on every refresh."""

    current: SlotInfo
    next: SlotInfo
    facility_status: FacilityStatus
    has_any_reservations_today: bool
    last_updated: datetime

    def same_as(self, other: Optional["DerivedStatus"]) -> bool:
        """Value equality ignoring ``last_updated``."""
        t('monitoring.court_status.DerivedStatus.same_as')
        if other is None:
            return False
        return (
            self.current == other.current
            and self.next == other.next
            and self.facility_status == other.facility_status
            and self.has_any_reservations_today == other.has_any_reservations_today
        )


def empty_slot(message: str) -> SlotInfo:
    t('monitoring.court_status.empty_slot')
    return SlotInfo(exists=False, time_range=message)


def create_player_display(name: str, is_guest: bool) -> PlayerDisplay:
    t('monitoring.court_status.create_player_display')
    return PlayerDisplay(
        name=name,
        is_guest=is_guest,
        initials=get_initials(name),
        avatar_color=get_avatar_color(name),
    )


def build_players(entries: Sequence[Any]) -> Tuple[PlayerDisplay, ...]:
    """Player displays for a reservation; unrecognised entries are skipped."""
    t('monitoring.court_status.build_players')
    players: List[PlayerDisplay] = []
    for entry in entries or ():
        if isinstance(entry, PlayerEntry):
            players.append(create_player_display(entry.name, entry.is_guest))
        elif isinstance(entry, str):
            players.append(create_player_display(entry, False))
        elif isinstance(entry, Mapping):
            name = entry.get("name") or entry.get("fullName") or constants.UNKNOWN_PLAYER_NAME
            players.append(create_player_display(str(name), entry.get("isGuest") is True))
    return tuple(players)


def build_slot_info(reservation: ReservationRecord) -> SlotInfo:
    t('monitoring.court_status.build_slot_info')
    time_range = format_time_range(reservation.time_slot, reservation.end_time_slot)

    if reservation.is_blocked:
        return SlotInfo(
            exists=True,
            time_range=time_range,
            players=(),
            is_blocked=True,
            block_info=BlockInfo(
                reason=reservation.block_reason or constants.DEFAULT_BLOCK_REASON,
                notes=reservation.block_notes or constants.DEFAULT_BLOCK_NOTES,
            ),
        )

    return SlotInfo(
        exists=True,
        time_range=time_range,
        players=build_players(reservation.players),
        is_blocked=False,
    )


def _earliest(reservations: Sequence[ReservationRecord]) -> Optional[ReservationRecord]:
    # min() keeps the first of equal keys, so ties follow list order.
    if not reservations:
        return None
    return min(reservations, key=lambda reservation: reservation.time_slot)


def _before_hours_status(
    active: Sequence[ReservationRecord],
    hours: OperatingHours,
    last_updated: datetime,
) -> DerivedStatus:
    t('monitoring.court_status._before_hours_status')
    first = _earliest([reservation for reservation in active if not reservation.is_blocked])
    return DerivedStatus(
        current=empty_slot(constants.court_opens_label(format_hour(hours.open_hour))),
        next=build_slot_info(first) if first else empty_slot(constants.LABEL_NO_RESERVATIONS_TODAY),
        facility_status=FacilityStatus.CLOSED,
        has_any_reservations_today=bool(active),
        last_updated=last_updated,
    )


def _after_hours_status(hours: OperatingHours, last_updated: datetime) -> DerivedStatus:
    t('monitoring.court_status._after_hours_status')
    return DerivedStatus(
        current=empty_slot(constants.LABEL_COURT_CLOSED),
        next=empty_slot(constants.opens_tomorrow_label(format_hour(hours.open_hour))),
        facility_status=FacilityStatus.CLOSED,
        has_any_reservations_today=False,
        last_updated=last_updated,
    )


def compute_status(
    reservations: Sequence[ReservationRecord],
    now: datetime,
    *,
    hours: Optional[OperatingHours] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> DerivedStatus:
    """Compute current/next slots and the facility status for ``now``.

    Args:
        reservations: Every reservation for the business-timezone date of ``now``
        now: Current wall-clock time already expressed in the business timezone
        hours: Operating hours, defaults to 5 AM - 10 PM
        clock: Source for ``last_updated``; defaults to the real time in ``now``'s zone

    Returns:
        A fresh ``DerivedStatus``; no exception is raised for odd data.
    """
    t('monitoring.court_status.compute_status')
    hours = hours or OperatingHours()
    last_updated = clock() if clock else datetime.now(now.tzinfo)
    current_hour = now.hour

    active = [reservation for reservation in reservations if reservation.is_active]

    if hours.is_before_opening(current_hour):
        return _before_hours_status(active, hours, last_updated)
    if hours.is_after_closing(current_hour):
        return _after_hours_status(hours, last_updated)

    current = next((reservation for reservation in active if reservation.covers_hour(current_hour)), None)

    upcoming = [
        reservation
        for reservation in active
        if reservation.time_slot > current_hour
        and reservation is not current
    ]
    upcoming_first = _earliest(upcoming)

    return DerivedStatus(
        current=build_slot_info(current) if current else empty_slot(constants.LABEL_COURT_AVAILABLE_NOW),
        next=build_slot_info(upcoming_first) if upcoming_first else empty_slot(constants.LABEL_NO_UPCOMING),
        facility_status=FacilityStatus.OPEN if active else FacilityStatus.AVAILABLE,
        has_any_reservations_today=bool(active),
        last_updated=last_updated,
    )


def empty_status(last_updated: Optional[datetime] = None) -> DerivedStatus:
    """Status shown when no club is selected."""
    t('monitoring.court_status.empty_status')
    return DerivedStatus(
        current=empty_slot(""),
        next=empty_slot(""),
        facility_status=FacilityStatus.AVAILABLE,
        has_any_reservations_today=False,
        last_updated=last_updated or datetime.now(),
    )


def unavailable_status(last_updated: Optional[datetime] = None) -> DerivedStatus:
    """Fallback status after a failed reservation fetch."""
    t('monitoring.court_status.unavailable_status')
    return DerivedStatus(
        current=empty_slot(constants.LABEL_UNABLE_TO_LOAD),
        next=empty_slot(""),
        facility_status=FacilityStatus.AVAILABLE,
        has_any_reservations_today=False,
        last_updated=last_updated or datetime.now(),
    )


__all__ = [
    "BlockInfo",
    "DerivedStatus",
    "FacilityStatus",
    "OperatingHours",
    "PlayerDisplay",
    "SlotInfo",
    "build_players",
    "build_slot_info",
    "compute_status",
    "create_player_display",
    "empty_slot",
    "empty_status",
    "unavailable_status",
]
