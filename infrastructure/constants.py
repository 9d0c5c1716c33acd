"""
Constants Module - Centralized configuration values
===================================================

PURPOSE: Single source of truth for the court status service defaults
SCOPE: Operating hours, business timezone, display labels, avatar palette
"""
from tracking import t

# Business timezone and operating hours
BUSINESS_TIMEZONE = "Asia/Manila"
COURT_OPEN_HOUR = 5    # 5 AM, inclusive
COURT_CLOSE_HOUR = 22  # 10 PM, exclusive

# Polling
DEFAULT_POLL_INTERVAL_SECONDS = 60
DEFAULT_API_TIMEOUT_SECONDS = 10.0
DEFAULT_API_URL = "http://localhost:3000/api"

# Reservation statuses
STATUS_CONFIRMED = "confirmed"
STATUS_PENDING = "pending"
STATUS_CANCELLED = "cancelled"
STATUS_NO_SHOW = "no-show"
STATUS_BLOCKED = "blocked"
STATUS_COMPLETED = "completed"
INACTIVE_STATUSES = frozenset({STATUS_CANCELLED, STATUS_NO_SHOW})

# Block annotation defaults
DEFAULT_BLOCK_REASON = "maintenance"
DEFAULT_BLOCK_NOTES = "Court temporarily unavailable"
BLOCK_REASON_LABELS = {
    "maintenance": "Maintenance",
    "private_event": "Private Event",
    "weather": "Weather",
    "other": "Other",
}

# Placeholder labels
LABEL_COURT_AVAILABLE_NOW = "Court Available Now"
LABEL_NO_UPCOMING = "No Upcoming Reservation"
LABEL_NO_RESERVATIONS_TODAY = "No Reservations Today"
LABEL_COURT_CLOSED = "Court Closed"
LABEL_UNABLE_TO_LOAD = "Unable to load status"
UNKNOWN_PLAYER_NAME = "Unknown"

# Avatar colours: blue, green, amber, red, purple, pink, cyan, orange
AVATAR_COLORS = (
    "#3b82f6",
    "#10b981",
    "#f59e0b",
    "#ef4444",
    "#8b5cf6",
    "#ec4899",
    "#06b6d4",
    "#f97316",
)

# Telegram callback tokens
CALLBACK_STATUS_PREFIX = "court_status_"
CALLBACK_STATUS_REFRESH = "court_status_refresh"
CALLBACK_STATUS_SUBSCRIBE = "court_status_subscribe"
CALLBACK_STATUS_UNSUBSCRIBE = "court_status_unsubscribe"


def court_opens_label(open_label: str) -> str:
    """Placeholder shown before opening time."""
    t('infrastructure.constants.court_opens_label')
    return f"Court Opens at {open_label}"


def opens_tomorrow_label(open_label: str) -> str:
    """Placeholder shown after closing time."""
    t('infrastructure.constants.opens_tomorrow_label')
    return f"Opens Tomorrow at {open_label}"


def block_reason_label(reason: str) -> str:
    """Human readable label for a block reason code."""
    t('infrastructure.constants.block_reason_label')
    return BLOCK_REASON_LABELS.get(reason, reason.replace("_", " ").title())
