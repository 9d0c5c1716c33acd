"""Court status derivation and polling."""

from .business_clock import BusinessClock
from .court_status import (
    BlockInfo,
    DerivedStatus,
    FacilityStatus,
    OperatingHours,
    PlayerDisplay,
    SlotInfo,
    compute_status,
    empty_status,
    unavailable_status,
)
from .court_status_poller import CourtStatusPoller

__all__ = [
    "BlockInfo",
    "BusinessClock",
    "CourtStatusPoller",
    "DerivedStatus",
    "FacilityStatus",
    "OperatingHours",
    "PlayerDisplay",
    "SlotInfo",
    "compute_status",
    "empty_status",
    "unavailable_status",
]
