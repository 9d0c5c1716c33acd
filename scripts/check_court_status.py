#!/usr/bin/env python3
"""Fetch today's reservations once and print the derived court status."""

from __future__ import annotations
from tracking import t

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from botapp.ui.court_status import format_court_status_message
from infrastructure.settings import get_settings
from monitoring import BusinessClock, CourtStatusPoller, OperatingHours
from reservations.services import ClubContext, ReservationApiClient

LOGGER = logging.getLogger("CourtStatusCheck")


def build_parser() -> argparse.ArgumentParser:
    t('scripts.check_court_status.build_parser')
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Print the current court status once")
    parser.add_argument("--api-url", default=settings.api_url, help="Reservation API base URL")
    parser.add_argument("--club-id", default=settings.club_id, help="Club identifier sent as X-Club-Id")
    parser.add_argument("--token", default=settings.api_token, help="Bearer token for the API")
    parser.add_argument("--timezone", default=settings.timezone, help="Business timezone name")
    parser.add_argument("--open-hour", type=int, default=settings.open_hour)
    parser.add_argument("--close-hour", type=int, default=settings.close_hour)
    return parser


async def check_once(args: argparse.Namespace) -> int:
    """Run a single refresh and print the Telegram-formatted result."""
    t('scripts.check_court_status.check_once')
    client = ReservationApiClient(
        args.api_url,
        club_context=ClubContext(club_id=args.club_id, auth_token=args.token),
        timeout_seconds=get_settings().api_timeout_seconds,
    )
    clock = BusinessClock(args.timezone)
    hours = OperatingHours(open_hour=args.open_hour, close_hour=args.close_hour)

    async with client:
        poller = CourtStatusPoller(client, clock, hours=hours, logger=LOGGER)
        status = await poller.refresh()

    print(format_court_status_message(status, now=clock.now()))
    return 1 if poller.last_error else 0


def main(argv: Optional[List[str]] = None) -> None:
    t('scripts.check_court_status.main')
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)
    sys.exit(asyncio.run(check_once(args)))


if __name__ == "__main__":
    main()
