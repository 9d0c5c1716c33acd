"""Utilities to register Telegram command and callback handlers."""

from __future__ import annotations
from tracking import t

from telegram.ext import CallbackQueryHandler, CommandHandler
from telegram.ext import Application

from infrastructure.constants import CALLBACK_STATUS_PREFIX


def register_core_handlers(application: Application, bot) -> None:
    """Wire up the bot's command, callback, and error handlers."""

    t('botapp.commands.handlers.register_core_handlers')

    status = bot.status_handler
    application.add_handler(CommandHandler("start", bot.start_command))
    application.add_handler(CommandHandler("court_status", status.court_status_command))
    application.add_handler(CommandHandler("subscribe", status.subscribe_command))
    application.add_handler(CommandHandler("unsubscribe", status.unsubscribe_command))
    application.add_handler(
        CallbackQueryHandler(status.handle_callback, pattern=f"^{CALLBACK_STATUS_PREFIX}")
    )
    application.add_error_handler(bot.error_handler)


__all__ = ['register_core_handlers']
