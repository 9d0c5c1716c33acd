"""Canonical reservation record read from the club reservation API."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

from infrastructure.constants import INACTIVE_STATUSES, STATUS_BLOCKED


class ReservationStatus(str, Enum):
    """Statuses the reservation API reports."""

    CONFIRMED = "confirmed"
    PENDING = "pending"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"
    BLOCKED = "blocked"
    COMPLETED = "completed"


@dataclass(frozen=True)
class PlayerEntry:
    """A structured player listed on a reservation."""

    name: str
    is_guest: bool = False


@dataclass(frozen=True)
class ReservationRecord:
    """
    One reservation for a single calendar date.

    Attributes:
        id: Opaque identifier from the API
        date: ISO date (business timezone) the reservation belongs to
        time_slot: First occupied hour, inclusive
        end_time_slot: Hour the occupancy ends, exclusive
        status: Raw status string, see :class:`ReservationStatus`
        players: Player entries as received (names or mappings)
        block_reason: Only set for blocked reservations
        block_notes: Only set for blocked reservations
    """

    id: str
    date: str
    time_slot: int
    end_time_slot: int
    status: str = ReservationStatus.PENDING.value
    players: Tuple[Any, ...] = field(default_factory=tuple)
    block_reason: Optional[str] = None
    block_notes: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status not in INACTIVE_STATUSES

    @property
    def is_blocked(self) -> bool:
        return self.status == STATUS_BLOCKED

    def covers_hour(self, hour: int) -> bool:
        """Return True when ``hour`` falls inside ``[time_slot, end_time_slot)``."""
        return self.time_slot <= hour < self.end_time_slot

    def __str__(self) -> str:
        return f"{self.time_slot}:00-{self.end_time_slot}:00 ({self.status})"
