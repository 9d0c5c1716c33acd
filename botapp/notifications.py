"""Push court status changes to subscribed chats."""

from __future__ import annotations

import logging
from typing import Optional

from tracking import t

from botapp.state.subscriber_store import SubscriberStore
from botapp.ui.court_status import create_court_status_keyboard, format_court_status_message
from monitoring.court_status import DerivedStatus


class StatusChangeNotifier:
    """Poller listener that sends each changed status to every subscriber."""

    def __init__(
        self,
        subscribers: SubscriberStore,
        *,
        application=None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        t('botapp.notifications.StatusChangeNotifier.__init__')
        self.subscribers = subscribers
        self.application = application
        self.logger = logger or logging.getLogger('StatusChangeNotifier')
        self._has_baseline = False

    async def __call__(self, status: DerivedStatus) -> None:
        t('botapp.notifications.StatusChangeNotifier.__call__')
        # The first status after startup is the baseline, not a change.
        if not self._has_baseline:
            self._has_baseline = True
            return

        if not self.application:
            self.logger.warning("No application context for court status notifications")
            return

        chat_ids = self.subscribers.all()
        if not chat_ids:
            return

        text = format_court_status_message(status)
        sent = 0
        for chat_id in chat_ids:
            try:
                await self.application.bot.send_message(
                    chat_id=chat_id,
                    text=text,
                    parse_mode='Markdown',
                    reply_markup=create_court_status_keyboard(is_subscribed=True),
                )
                sent += 1
            except Exception as exc:
                self.logger.error("Failed to send court status update to %s: %s", chat_id, exc)

        self.logger.info("Sent court status update to %s/%s subscribers", sent, len(chat_ids))


__all__ = ["StatusChangeNotifier"]
