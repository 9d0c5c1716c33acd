"""Court status message and keyboard builders for the Telegram UI."""

from __future__ import annotations
from tracking import t

from datetime import datetime
from typing import Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from botapp.ui.text_blocks import (
    MarkdownBlockBuilder,
    bold_telegram_text,
    code_telegram_text,
    escape_telegram_markdown,
    italic_telegram_text,
)
from infrastructure.constants import (
    CALLBACK_STATUS_REFRESH,
    CALLBACK_STATUS_SUBSCRIBE,
    CALLBACK_STATUS_UNSUBSCRIBE,
    LABEL_COURT_AVAILABLE_NOW,
    LABEL_UNABLE_TO_LOAD,
    block_reason_label,
)
from monitoring.court_status import DerivedStatus, FacilityStatus, SlotInfo

LOADING_MESSAGE = "⏳ Loading court status..."
EMPTY_STATE_MESSAGE = "✅ The court is free all day. No reservations yet today."
NO_CLUB_MESSAGE = "ℹ️ No club is configured, so there is no court status to show."
AVAILABLE_ICON = "🟢"
NO_UPCOMING_ICON = "📭"


def status_icon(status: Optional[DerivedStatus]) -> str:
    t('botapp.ui.court_status.status_icon')
    if status is None:
        return "🎾"
    if status.current.time_range == LABEL_UNABLE_TO_LOAD:
        return "⚠️"
    if status.facility_status == FacilityStatus.AVAILABLE:
        return "✅"
    if status.facility_status == FacilityStatus.CLOSED:
        return "🕒"
    return "🎾"


def show_empty_state(status: Optional[DerivedStatus]) -> bool:
    """True when the court is open with nothing booked all day."""
    t('botapp.ui.court_status.show_empty_state')
    if status is None or status.facility_status == FacilityStatus.CLOSED:
        return False
    return (
        not status.has_any_reservations_today
        and not status.current.exists
        and not status.next.exists
        and status.current.time_range == LABEL_COURT_AVAILABLE_NOW
    )


def show_normal_state(status: Optional[DerivedStatus]) -> bool:
    """True when the current/next split view should be rendered."""
    t('botapp.ui.court_status.show_normal_state')
    if status is None:
        return False
    return (
        status.facility_status == FacilityStatus.CLOSED
        or status.has_any_reservations_today
        or status.current.exists
        or status.next.exists
    )


def is_current_slot_available(status: Optional[DerivedStatus]) -> bool:
    t('botapp.ui.court_status.is_current_slot_available')
    if status is None or status.facility_status == FacilityStatus.CLOSED:
        return False
    return not status.current.exists and not status.current.is_blocked


def is_next_slot_empty(status: Optional[DerivedStatus]) -> bool:
    t('botapp.ui.court_status.is_next_slot_empty')
    if status is None or status.facility_status == FacilityStatus.CLOSED:
        return False
    return not status.next.exists and not status.next.is_blocked


def format_time_ago(last_updated: Optional[datetime], now: Optional[datetime] = None) -> str:
    """Relative age of a status: "just now", "42s ago", "5m ago", "2h ago"."""
    t('botapp.ui.court_status.format_time_ago')
    if last_updated is None:
        return ""

    reference = now or datetime.now(last_updated.tzinfo)
    diff_seconds = int((reference - last_updated).total_seconds())

    if diff_seconds < 10:
        return "just now"
    if diff_seconds < 60:
        return f"{diff_seconds}s ago"
    if diff_seconds < 3600:
        return f"{diff_seconds // 60}m ago"
    return f"{diff_seconds // 3600}h ago"


def _slot_lines(
    builder: MarkdownBlockBuilder,
    title: str,
    slot: SlotInfo,
    vacant_icon: Optional[str] = None,
) -> None:
    t('botapp.ui.court_status._slot_lines')
    builder.line(bold_telegram_text(title))

    if not slot.exists:
        if slot.time_range:
            prefix = f"{vacant_icon} " if vacant_icon else ""
            builder.line(f"{prefix}{escape_telegram_markdown(slot.time_range)}")
        return

    builder.line(f"🕐 {escape_telegram_markdown(slot.time_range)}")

    if slot.is_blocked and slot.block_info:
        builder.line(f"🚧 Blocked: {escape_telegram_markdown(block_reason_label(slot.block_info.reason))}")
        builder.line(italic_telegram_text(slot.block_info.notes))
        return

    for player in slot.players:
        guest_tag = " (Guest)" if player.is_guest else ""
        builder.bullet(
            f"{code_telegram_text(player.initials)} "
            f"{escape_telegram_markdown(player.name)}{guest_tag}"
        )


def format_court_status_message(status: Optional[DerivedStatus], now: Optional[datetime] = None) -> str:
    """Build the Markdown court status message for ``status``."""
    t('botapp.ui.court_status.format_court_status_message')
    if status is None:
        return LOADING_MESSAGE

    builder = MarkdownBlockBuilder()
    builder.heading(f"{status_icon(status)} *Court Status*")
    builder.blank()

    if show_empty_state(status):
        builder.line(EMPTY_STATE_MESSAGE)
    elif show_normal_state(status):
        now_icon = AVAILABLE_ICON if is_current_slot_available(status) else None
        next_icon = NO_UPCOMING_ICON if is_next_slot_empty(status) else None
        _slot_lines(builder, "Now", status.current, now_icon)
        builder.blank()
        _slot_lines(builder, "Next", status.next, next_icon)
    elif status.current.time_range:
        builder.line(escape_telegram_markdown(status.current.time_range))
    else:
        builder.line(NO_CLUB_MESSAGE)

    time_ago = format_time_ago(status.last_updated, now)
    if time_ago:
        builder.blank()
        builder.line(italic_telegram_text(f"Updated {time_ago}"))
    return builder.build()


def create_court_status_keyboard(is_subscribed: bool = False) -> InlineKeyboardMarkup:
    """Refresh button plus a toggle for change notifications."""
    t('botapp.ui.court_status.create_court_status_keyboard')
    if is_subscribed:
        toggle = InlineKeyboardButton("🔕 Stop Updates", callback_data=CALLBACK_STATUS_UNSUBSCRIBE)
    else:
        toggle = InlineKeyboardButton("🔔 Notify on Changes", callback_data=CALLBACK_STATUS_SUBSCRIBE)

    return InlineKeyboardMarkup([
        [InlineKeyboardButton("🔄 Refresh", callback_data=CALLBACK_STATUS_REFRESH)],
        [toggle],
    ])


__all__ = [
    "LOADING_MESSAGE",
    "EMPTY_STATE_MESSAGE",
    "NO_CLUB_MESSAGE",
    "create_court_status_keyboard",
    "format_court_status_message",
    "format_time_ago",
    "is_current_slot_available",
    "is_next_slot_empty",
    "show_empty_state",
    "show_normal_state",
    "status_icon",
]
