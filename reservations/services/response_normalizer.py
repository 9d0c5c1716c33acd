"""Normalize reservation API responses into canonical records.

The reservation API has answered with several envelope shapes over time:

* a bare list of reservations
* ``{"success": true, "data": [...]}``
* ``{"success": true, "data": {"reservations": [...]}}``
* ``{"reservations": [...]}``

Everything downstream of this module only sees ``ReservationRecord``.
"""

from __future__ import annotations
from tracking import t

import logging
from typing import Any, List, Mapping, Optional

from infrastructure.constants import UNKNOWN_PLAYER_NAME
from reservations.models import PlayerEntry, ReservationRecord, ReservationStatus

logger = logging.getLogger('ResponseNormalizer')


def extract_reservation_payload(response: Any) -> List[Any]:
    """Return the raw reservation list from any tolerated envelope shape."""
    t('reservations.services.response_normalizer.extract_reservation_payload')

    if isinstance(response, list):
        return response

    if isinstance(response, Mapping):
        data = response.get("data")
        if response.get("success") and isinstance(data, (list, Mapping)):
            if isinstance(data, list):
                return data
            if isinstance(data.get("reservations"), list):
                return data["reservations"]
            logger.warning("Reservation response data has no reservations list")
            return []
        if isinstance(response.get("reservations"), list):
            return response["reservations"]

    logger.warning("Unrecognised reservation response shape: %s", type(response).__name__)
    return []


def _to_int(value: Any) -> Optional[int]:
    t('reservations.services.response_normalizer._to_int')
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def coerce_player(raw: Any) -> Optional[PlayerEntry]:
    """Turn a legacy name string or a player mapping into a ``PlayerEntry``."""
    t('reservations.services.response_normalizer.coerce_player')

    if isinstance(raw, PlayerEntry):
        return raw
    if isinstance(raw, str):
        return PlayerEntry(name=raw, is_guest=False)
    if isinstance(raw, Mapping):
        name = raw.get("name") or raw.get("fullName") or UNKNOWN_PLAYER_NAME
        return PlayerEntry(name=str(name), is_guest=raw.get("isGuest") is True)
    return None


def coerce_reservation(raw: Any, *, date_hint: str = "") -> Optional[ReservationRecord]:
    """Map one raw reservation mapping onto ``ReservationRecord``.

    Returns ``None`` for entries that cannot describe a slot: non-mappings,
    a missing start hour, or an end hour that is not after the start.
    """
    t('reservations.services.response_normalizer.coerce_reservation')

    if not isinstance(raw, Mapping):
        logger.warning("Skipping reservation entry of type %s", type(raw).__name__)
        return None

    time_slot = _to_int(raw.get("timeSlot"))
    if time_slot is None:
        logger.warning("Skipping reservation %s without a timeSlot", raw.get("_id") or raw.get("id"))
        return None

    end_time_slot = _to_int(raw.get("endTimeSlot"))
    if end_time_slot is None:
        duration = _to_int(raw.get("duration"))
        end_time_slot = time_slot + (duration if duration and duration > 0 else 1)

    if end_time_slot <= time_slot:
        logger.warning(
            "Skipping reservation %s with invalid slot %s-%s",
            raw.get("_id") or raw.get("id"),
            time_slot,
            end_time_slot,
        )
        return None

    players_raw = raw.get("players")
    players = []
    if isinstance(players_raw, list):
        for entry in players_raw:
            player = coerce_player(entry)
            if player is None:
                logger.debug("Dropping malformed player entry %r", entry)
                continue
            players.append(player)

    raw_date = raw.get("date")
    date_value = str(raw_date)[:10] if raw_date else date_hint

    return ReservationRecord(
        id=str(raw.get("_id") or raw.get("id") or ""),
        date=date_value,
        time_slot=time_slot,
        end_time_slot=end_time_slot,
        status=str(raw.get("status") or ReservationStatus.PENDING.value),
        players=tuple(players),
        block_reason=raw.get("blockReason") or None,
        block_notes=raw.get("blockNotes") or None,
    )


def normalize_reservations_response(response: Any, *, date_hint: str = "") -> List[ReservationRecord]:
    """Extract and coerce every reservation in ``response``."""
    t('reservations.services.response_normalizer.normalize_reservations_response')

    payload = extract_reservation_payload(response)
    records: List[ReservationRecord] = []
    for entry in payload:
        record = coerce_reservation(entry, date_hint=date_hint)
        if record is not None:
            records.append(record)

    if not records:
        logger.debug("No reservations found in API response")
    else:
        logger.debug("Normalized %s reservations", len(records))
    return records


__all__ = [
    "extract_reservation_payload",
    "coerce_player",
    "coerce_reservation",
    "normalize_reservations_response",
]
