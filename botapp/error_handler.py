"""
Centralized error handling for the court status bot
"""
from tracking import t

import logging
from telegram import Update
from telegram.ext import ContextTypes

from botapp.ui.court_status import create_court_status_keyboard


GENERIC_ERROR_MESSAGE = (
    "❌ *Unexpected Error*\n\n"
    "Something went wrong while processing your request. "
    "Please try again in a moment."
)


class ErrorHandler:
    """Static entry points for reporting failed Telegram updates."""

    @staticmethod
    async def handle_telegram_error(update: Update, context: ContextTypes.DEFAULT_TYPE, error: Exception) -> None:
        """
        Log an error raised while handling an update and tell the user.

        Args:
            update: The telegram update that caused the error (may be None)
            context: The callback context
            error: The exception that occurred
        """
        t('botapp.error_handler.ErrorHandler.handle_telegram_error')
        logger = logging.getLogger('ErrorHandler')

        if "message is not modified" in str(error).lower():
            # Repeated button presses on an unchanged status
            logger.warning(f"Telegram message not modified: {error}")
            return

        logger.error(f"Telegram error occurred: {type(error).__name__}: {error}", exc_info=error)

        if update is None:
            logger.warning("No update object available - cannot send error message to user")
            return

        user = getattr(update, "effective_user", None)
        if user:
            logger.error(f"Error context - User ID: {user.id}")

        try:
            reply_markup = create_court_status_keyboard()
            callback_query = getattr(update, "callback_query", None)
            message = getattr(update, "message", None)
            if callback_query:
                await callback_query.edit_message_text(
                    GENERIC_ERROR_MESSAGE,
                    parse_mode='Markdown',
                    reply_markup=reply_markup,
                )
            elif message:
                await message.reply_text(
                    GENERIC_ERROR_MESSAGE,
                    parse_mode='Markdown',
                    reply_markup=reply_markup,
                )
            else:
                logger.warning("Unable to send error message - no callback query or message available")
        except Exception as send_error:
            logger.error(f"Failed to send error message to user: {send_error}", exc_info=True)
