"""Display helpers for reservation slots and player avatars."""

from __future__ import annotations
from tracking import t

from infrastructure.constants import AVATAR_COLORS


def format_hour(hour: int) -> str:
    """Format an hour of day as a 12-hour clock label."""
    t('monitoring.slot_formatting.format_hour')
    if hour == 0:
        return "12:00 AM"
    if hour < 12:
        return f"{hour}:00 AM"
    if hour == 12:
        return "12:00 PM"
    return f"{hour - 12}:00 PM"


def format_time_range(start_hour: int, end_hour: int) -> str:
    t('monitoring.slot_formatting.format_time_range')
    return f"{format_hour(start_hour)} - {format_hour(end_hour)}"


def get_initials(name: str) -> str:
    """First letters of the first and last name, or the first two characters."""
    t('monitoring.slot_formatting.get_initials')
    parts = name.split()
    if len(parts) >= 2:
        return (parts[0][0] + parts[-1][0]).upper()
    return name.strip()[:2].upper()


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def name_hash(name: str) -> int:
    """String hash compatible with the web client's avatar colouring.

    ``hash = ord(ch) + ((hash << 5) - hash)`` where the shift works on the
    signed 32-bit value of ``hash`` and ``ch`` walks UTF-16 code units, so
    the same name picks the same colour on every client.
    """
    t('monitoring.slot_formatting.name_hash')
    encoded = name.encode("utf-16-le", "surrogatepass")
    acc = 0
    for index in range(0, len(encoded), 2):
        unit = int.from_bytes(encoded[index:index + 2], "little")
        acc = unit + (_to_int32(_to_int32(acc) << 5) - acc)
    return acc


def get_avatar_color(name: str) -> str:
    t('monitoring.slot_formatting.get_avatar_color')
    return AVATAR_COLORS[abs(name_hash(name)) % len(AVATAR_COLORS)]


__all__ = [
    "format_hour",
    "format_time_range",
    "get_initials",
    "name_hash",
    "get_avatar_color",
]
