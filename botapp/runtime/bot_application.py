"""Telegram bot runtime application wiring."""

from __future__ import annotations
from tracking import t

import logging
from typing import Any, Dict, Optional

from telegram import Update
from telegram.ext import Application, ContextTypes

from botapp.bootstrap.container import DependencyContainer
from botapp.commands import register_core_handlers
from botapp.config import BotAppConfig, load_bot_config
from botapp.error_handler import ErrorHandler
from botapp.runtime.lifecycle import LifecycleManager
from botapp.ui.text_blocks import MarkdownBlockBuilder


class BotApplication:
    """Assemble dependencies and handlers for the Telegram bot runtime."""

    def __init__(
        self,
        config: Optional[BotAppConfig] = None,
        *,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> None:
        t('botapp.runtime.bot_application.BotApplication.__init__')
        self.logger = logging.getLogger('CourtStatusBot')
        self.config = config or load_bot_config()
        self.token = self.config.telegram.token
        self.container = DependencyContainer(self.config, overrides)
        dependencies = self.container.build_dependencies()

        self.api_client = dependencies.api_client
        self.poller = dependencies.poller
        self.subscribers = dependencies.subscribers
        self.status_handler = dependencies.status_handler
        self.lifecycle = LifecycleManager(dependencies, logger=self.logger)
        self.application = None

    async def start_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Handle /start command."""
        t('botapp.runtime.bot_application.BotApplication.start_command')

        builder = MarkdownBlockBuilder()
        builder.heading("🎾 *Court Status Bot*")
        builder.blank()
        builder.line("See who is on the court now and who plays next.")
        builder.blank()
        builder.bullets([
            "/court\\_status - show the current court status",
            "/subscribe - get a message whenever the status changes",
            "/unsubscribe - stop status change messages",
        ])
        await update.message.reply_text(builder.build(), parse_mode='Markdown')

    async def error_handler(self, update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Central error handler for Telegram exceptions."""
        t('botapp.runtime.bot_application.BotApplication.error_handler')
        await ErrorHandler.handle_telegram_error(update, context, context.error)

    def run(self) -> None:
        """Run the Telegram bot using asyncio-ready Application."""
        t('botapp.runtime.bot_application.BotApplication.run')

        if not self.token:
            raise ValueError("TELEGRAM_BOT_TOKEN is not configured")

        app = Application.builder().token(self.token).build()
        register_core_handlers(app, self)

        app.post_init = self._post_init
        app.post_stop = self._post_stop

        self.application = app
        self.logger.info("Starting async bot...")
        app.run_polling()

    async def _post_init(self, application) -> None:
        """Initialize async components after the Telegram app starts."""
        t('botapp.runtime.bot_application.BotApplication._post_init')
        await self.lifecycle.post_init(application)
        self.application = application

    async def _post_stop(self, application) -> None:
        """Clean up async components after the Telegram app stops."""
        t('botapp.runtime.bot_application.BotApplication._post_stop')
        await self.lifecycle.post_stop(application)
        self.application = None


__all__ = ['BotApplication']
