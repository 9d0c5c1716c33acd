"""Domain model definitions for reservations."""

from .reservation import PlayerEntry, ReservationRecord, ReservationStatus

__all__ = ["PlayerEntry", "ReservationRecord", "ReservationStatus"]
