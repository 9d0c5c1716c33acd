"""Lifecycle orchestration for the Telegram bot runtime."""

from __future__ import annotations
from tracking import t

import logging
from typing import Optional

from botapp.bootstrap import BotDependencies


class LifecycleManager:
    """Start and stop the court status poller alongside the bot."""

    def __init__(
        self,
        dependencies: BotDependencies,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        t('botapp.runtime.lifecycle.LifecycleManager.__init__')
        self.dependencies = dependencies
        self.logger = logger or logging.getLogger('LifecycleManager')
        self.application = None
        self._unsubscribe_notifier = None

    async def post_init(self, application) -> None:
        """Attach the notifier and begin polling once the Telegram app is ready."""

        t('botapp.runtime.lifecycle.LifecycleManager.post_init')
        self.application = application

        notifier = self.dependencies.notifier
        notifier.application = application
        self._unsubscribe_notifier = self.dependencies.poller.subscribe(notifier)

        if not self.dependencies.api_client.has_club_selected:
            self.logger.warning("COURT_CLUB_ID is not set - court status will stay empty")

        try:
            await self.dependencies.poller.start_polling()
        except Exception as exc:  # pragma: no cover - defensive guard
            self.logger.error("Court status poller failed to start: %s", exc)

        self.logger.info("Bot started successfully - awaiting messages...")

    async def post_stop(self, application) -> None:
        """Stop polling and release the HTTP client."""

        t('botapp.runtime.lifecycle.LifecycleManager.post_stop')
        self.logger.info("🔴 Starting bot shutdown sequence...")

        if self._unsubscribe_notifier:
            self._unsubscribe_notifier()
            self._unsubscribe_notifier = None

        await self.dependencies.poller.stop_polling()
        self.logger.info("✅ Court status poller stopped")

        try:
            await self.dependencies.api_client.close()
        except Exception as exc:  # pragma: no cover - defensive guard
            self.logger.error("❌ Error closing reservation API client: %s", exc)

        self.dependencies.notifier.application = None
        self.logger.info("✅ Bot shutdown sequence completed")
        self.application = None


__all__ = ['LifecycleManager']
