from tracking import t

from datetime import timedelta

import pytest

from botapp.ui.court_status import (
    EMPTY_STATE_MESSAGE,
    LOADING_MESSAGE,
    NO_CLUB_MESSAGE,
    create_court_status_keyboard,
    format_court_status_message,
    format_time_ago,
    is_current_slot_available,
    is_next_slot_empty,
    show_empty_state,
    show_normal_state,
    status_icon,
)
from monitoring.court_status import compute_status, empty_status, unavailable_status
from tests.helpers import fixed_clock, make_reservation


def _status(reservations, hour=10):
    t('tests.unit.test_court_status_ui._status')
    clock = fixed_clock(hour=hour)
    return compute_status(reservations, clock.now(), clock=clock.now)


def test_widget_predicates_for_free_day():
    t('tests.unit.test_court_status_ui.test_widget_predicates_for_free_day')
    status = _status([])

    assert status_icon(status) == "✅"
    assert show_empty_state(status) is True
    assert show_normal_state(status) is False
    assert is_current_slot_available(status) is True
    assert is_next_slot_empty(status) is True


def test_widget_predicates_for_closed_court():
    t('tests.unit.test_court_status_ui.test_widget_predicates_for_closed_court')
    status = _status([], hour=23)

    assert status_icon(status) == "🕒"
    assert show_empty_state(status) is False
    assert show_normal_state(status) is True
    assert is_current_slot_available(status) is False
    assert is_next_slot_empty(status) is False


def test_widget_predicates_for_occupied_court():
    t('tests.unit.test_court_status_ui.test_widget_predicates_for_occupied_court')
    status = _status([make_reservation(10)])

    assert status_icon(status) == "🎾"
    assert show_normal_state(status) is True
    assert is_current_slot_available(status) is False
    assert is_next_slot_empty(status) is True


def test_predicates_without_status():
    t('tests.unit.test_court_status_ui.test_predicates_without_status')
    assert show_empty_state(None) is False
    assert show_normal_state(None) is False
    assert format_court_status_message(None) == LOADING_MESSAGE


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "just now"), (9, "just now"), (42, "42s ago"), (60, "1m ago"), (3599, "59m ago"), (7300, "2h ago")],
)
def test_format_time_ago(seconds, expected):
    t('tests.unit.test_court_status_ui.test_format_time_ago')
    updated = fixed_clock().now()
    assert format_time_ago(updated, updated + timedelta(seconds=seconds)) == expected


def test_message_for_free_day_uses_empty_state():
    t('tests.unit.test_court_status_ui.test_message_for_free_day_uses_empty_state')
    status = _status([])

    message = format_court_status_message(status, now=status.last_updated)

    assert message.startswith("✅ *Court Status*")
    assert EMPTY_STATE_MESSAGE in message
    assert message.endswith("_Updated just now_")


def test_message_lists_players_for_current_and_next_slots():
    t('tests.unit.test_court_status_ui.test_message_lists_players_for_current_and_next_slots')
    status = _status(
        [
            make_reservation(10, players=("Juan Dela Cruz", {"name": "Ana", "isGuest": True})),
            make_reservation(13, 15, players=("Maria Santos",)),
        ]
    )

    message = format_court_status_message(status, now=status.last_updated)

    assert "*Now*" in message
    assert "🕐 10:00 AM - 11:00 AM" in message
    assert "• `JC` Juan Dela Cruz" in message
    assert "• `AN` Ana (Guest)" in message
    assert "*Next*" in message
    assert "🕐 1:00 PM - 3:00 PM" in message
    assert "• `MS` Maria Santos" in message


def test_message_shows_block_reason_and_escaped_notes():
    t('tests.unit.test_court_status_ui.test_message_shows_block_reason_and_escaped_notes')
    status = _status(
        [make_reservation(10, status="blocked", block_reason="private_event", block_notes="members_only")]
    )

    message = format_court_status_message(status, now=status.last_updated)

    assert "🚧 Blocked: Private Event" in message
    assert "_members\\_only_" in message


def test_message_for_closed_court_shows_placeholders():
    t('tests.unit.test_court_status_ui.test_message_for_closed_court_shows_placeholders')
    status = _status([], hour=3)

    message = format_court_status_message(status, now=status.last_updated)

    assert "Court Opens at 5:00 AM" in message
    assert "No Reservations Today" in message


def test_keyboard_toggle_reflects_subscription():
    t('tests.unit.test_court_status_ui.test_keyboard_toggle_reflects_subscription')
    unsubscribed = create_court_status_keyboard()
    subscribed = create_court_status_keyboard(is_subscribed=True)

    assert unsubscribed.inline_keyboard[0][0].callback_data == "court_status_refresh"
    assert unsubscribed.inline_keyboard[1][0].callback_data == "court_status_subscribe"
    assert subscribed.inline_keyboard[1][0].callback_data == "court_status_unsubscribe"


def test_message_for_failed_load_and_missing_club():
    t('tests.unit.test_court_status_ui.test_message_for_failed_load_and_missing_club')
    moment = fixed_clock().now()

    failed = format_court_status_message(unavailable_status(moment), now=moment)
    no_club = format_court_status_message(empty_status(moment), now=moment)

    assert failed.startswith("⚠️ *Court Status*")
    assert "Unable to load status" in failed
    assert EMPTY_STATE_MESSAGE not in failed
    assert NO_CLUB_MESSAGE in no_club
    assert show_empty_state(empty_status(moment)) is False


def test_message_marks_free_current_slot_between_reservations():
    t('tests.unit.test_court_status_ui.test_message_marks_free_current_slot_between_reservations')
    status = _status([make_reservation(9, 10), make_reservation(14, 16)])

    message = format_court_status_message(status, now=status.last_updated)

    assert "🟢 Court Available Now" in message
    assert "🕐 2:00 PM - 4:00 PM" in message
    assert "📭" not in message


def test_message_marks_missing_next_slot():
    t('tests.unit.test_court_status_ui.test_message_marks_missing_next_slot')
    status = _status([make_reservation(10, players=("Juan Dela Cruz",))])

    message = format_court_status_message(status, now=status.last_updated)

    assert "🕐 10:00 AM - 11:00 AM" in message
    assert "📭 No Upcoming Reservation" in message
    assert "🟢" not in message


def test_closed_court_placeholders_have_no_vacancy_icons():
    t('tests.unit.test_court_status_ui.test_closed_court_placeholders_have_no_vacancy_icons')
    status = _status([], hour=3)

    message = format_court_status_message(status, now=status.last_updated)

    assert "🟢" not in message
    assert "📭" not in message
