#!/usr/bin/env python3
"""
Async telegram bot - entrypoint wrapper around the runtime application.
"""
from tracking import t

import logging
import sys
from pathlib import Path

if __name__ == "__main__" and __package__ is None:
    sys.path.append(str(Path(__file__).resolve().parents[1]))
    __package__ = "botapp"

# Import logging configuration to initialize proper logging
from infrastructure import logging_config  # noqa: F401

from botapp.config import load_bot_config
from botapp.runtime import BotApplication


def main() -> None:
    """Entry point used by both CLI script and module execution."""
    t('botapp.app.main')

    logger = logging.getLogger('Main')
    logger.info("=" * 50)
    logger.info("Court Status Bot")
    logger.info("=" * 50)

    config = load_bot_config()
    logger.info(
        "Polling %s every %ss (timezone %s, club %s)",
        config.court_api.api_url,
        config.poll_interval,
        config.timezone,
        config.court_api.club_id or '<none>',
    )
    bot = BotApplication(config)

    try:
        logger.info("🚀 Starting bot...")
        bot.run()
    except KeyboardInterrupt:
        logger.info("✅ Stopped by user (Ctrl+C)")
    except Exception as exc:
        logger.error("❌ Error: %s", exc, exc_info=True)
        raise


if __name__ == '__main__':
    main()
