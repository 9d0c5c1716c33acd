"""Telegram commands and buttons for viewing the court status."""

from __future__ import annotations
from tracking import t

import logging
from typing import Optional

from telegram import Update
from telegram.error import BadRequest
from telegram.ext import ContextTypes

from botapp.handlers.router import CallbackRouter
from botapp.state.subscriber_store import SubscriberStore
from botapp.ui.court_status import create_court_status_keyboard, format_court_status_message
from infrastructure.constants import (
    CALLBACK_STATUS_REFRESH,
    CALLBACK_STATUS_SUBSCRIBE,
    CALLBACK_STATUS_UNSUBSCRIBE,
)
from monitoring.court_status_poller import CourtStatusPoller


class CourtStatusHandler:
    """Serves ``/court_status`` and the refresh/subscription buttons."""

    def __init__(
        self,
        poller: CourtStatusPoller,
        subscribers: SubscriberStore,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        t('botapp.handlers.court_status_handler.CourtStatusHandler.__init__')
        self.poller = poller
        self.subscribers = subscribers
        self.logger = logger or logging.getLogger('CourtStatusHandler')
        self.router = CallbackRouter(self._handle_unknown_callback)
        self.router.add_exact(CALLBACK_STATUS_REFRESH, self.handle_refresh)
        self.router.add_exact(CALLBACK_STATUS_SUBSCRIBE, self.handle_subscribe)
        self.router.add_exact(CALLBACK_STATUS_UNSUBSCRIBE, self.handle_unsubscribe)

    async def handle_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        t('botapp.handlers.court_status_handler.CourtStatusHandler.handle_callback')
        await self.router.dispatch(update, context)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    async def court_status_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Reply with the latest court status."""
        t('botapp.handlers.court_status_handler.CourtStatusHandler.court_status_command')
        chat_id = update.effective_chat.id
        status = await self.poller.get_current_status()
        await update.message.reply_text(
            format_court_status_message(status),
            parse_mode='Markdown',
            reply_markup=create_court_status_keyboard(self.subscribers.contains(chat_id)),
        )

    async def subscribe_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        t('botapp.handlers.court_status_handler.CourtStatusHandler.subscribe_command')
        chat_id = update.effective_chat.id
        if self.subscribers.add(chat_id):
            self.logger.info("Chat %s subscribed to court status updates", chat_id)
            await update.message.reply_text("🔔 You will be notified when the court status changes.")
        else:
            await update.message.reply_text("🔔 You are already receiving court status updates.")

    async def unsubscribe_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        t('botapp.handlers.court_status_handler.CourtStatusHandler.unsubscribe_command')
        chat_id = update.effective_chat.id
        if self.subscribers.remove(chat_id):
            self.logger.info("Chat %s unsubscribed from court status updates", chat_id)
            await update.message.reply_text("🔕 Court status updates stopped.")
        else:
            await update.message.reply_text("🔕 You were not subscribed to court status updates.")

    # ------------------------------------------------------------------
    # Callback buttons
    # ------------------------------------------------------------------
    async def handle_refresh(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        t('botapp.handlers.court_status_handler.CourtStatusHandler.handle_refresh')
        query = update.callback_query
        await self._safe_answer(query, "Refreshing...")
        status = await self.poller.refresh()
        await self._edit_status_message(update, format_court_status_message(status))

    async def handle_subscribe(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        t('botapp.handlers.court_status_handler.CourtStatusHandler.handle_subscribe')
        self.subscribers.add(update.effective_chat.id)
        await self._safe_answer(update.callback_query, "🔔 Notifications on")
        await self._edit_status_message(update, format_court_status_message(self.poller.status))

    async def handle_unsubscribe(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        t('botapp.handlers.court_status_handler.CourtStatusHandler.handle_unsubscribe')
        self.subscribers.remove(update.effective_chat.id)
        await self._safe_answer(update.callback_query, "🔕 Notifications off")
        await self._edit_status_message(update, format_court_status_message(self.poller.status))

    async def _handle_unknown_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        t('botapp.handlers.court_status_handler.CourtStatusHandler._handle_unknown_callback')
        query = update.callback_query
        self.logger.warning("Unknown callback data: %s", getattr(query, 'data', None))
        if query:
            await self._safe_answer(query, "Unknown action")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    async def _safe_answer(self, query, text: Optional[str] = None) -> None:
        t('botapp.handlers.court_status_handler.CourtStatusHandler._safe_answer')
        try:
            if text:
                await query.answer(text)
            else:
                await query.answer()
        except Exception as exc:
            self.logger.warning("Failed to answer callback query: %s", exc)

    async def _edit_status_message(self, update: Update, text: str) -> None:
        t('botapp.handlers.court_status_handler.CourtStatusHandler._edit_status_message')
        chat_id = update.effective_chat.id
        try:
            await update.callback_query.edit_message_text(
                text,
                parse_mode='Markdown',
                reply_markup=create_court_status_keyboard(self.subscribers.contains(chat_id)),
            )
        except BadRequest as exc:
            if "message is not modified" in str(exc).lower():
                self.logger.debug("Court status message unchanged for chat %s", chat_id)
                return
            raise


__all__ = ["CourtStatusHandler"]
