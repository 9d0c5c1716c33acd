"""Declarative callback routing utilities."""

from __future__ import annotations
from tracking import t
from typing import Awaitable, Callable, Dict

from telegram import Update
from telegram.ext import ContextTypes

CallbackHandlerFn = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[object]]


class CallbackRouter:
    """Routes callback query data to async handlers."""

    def __init__(self, default_handler: CallbackHandlerFn) -> None:
        t('botapp.handlers.router.CallbackRouter.__init__')
        self._default_handler = default_handler
        self._exact_routes: Dict[str, CallbackHandlerFn] = {}

    def add_exact(self, token: str, handler: CallbackHandlerFn) -> None:
        t('botapp.handlers.router.CallbackRouter.add_exact')
        self._exact_routes[token] = handler

    async def dispatch(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        t('botapp.handlers.router.CallbackRouter.dispatch')
        query = update.callback_query
        if not query or not query.data:
            await self._default_handler(update, context)
            return

        handler = self._exact_routes.get(query.data)
        if handler:
            await handler(update, context)
            return

        await self._default_handler(update, context)


__all__ = ["CallbackRouter"]
