"""Dependency container wiring bot runtime components together."""

from __future__ import annotations
from tracking import t

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from monitoring.business_clock import BusinessClock
from monitoring.court_status import OperatingHours
from monitoring.court_status_poller import CourtStatusPoller
from reservations.services import ClubContext, ReservationApiClient

from botapp.config import BotAppConfig
from botapp.handlers.court_status_handler import CourtStatusHandler
from botapp.notifications import StatusChangeNotifier
from botapp.state.subscriber_store import SubscriberStore


@dataclass(frozen=True)
class BotDependencies:
    """Concrete dependency snapshot for the Telegram bot runtime."""

    config: BotAppConfig
    api_client: ReservationApiClient
    clock: BusinessClock
    poller: CourtStatusPoller
    subscribers: SubscriberStore
    notifier: StatusChangeNotifier
    status_handler: CourtStatusHandler


class DependencyContainer:
    """Lazy dependency container with optional override support."""

    def __init__(
        self,
        config: BotAppConfig,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> None:
        t('botapp.bootstrap.container.DependencyContainer.__init__')
        self.config = config
        self._cache: Dict[str, Any] = {}
        if overrides:
            self._cache.update(overrides)

    def _resolve(self, key: str, factory: Callable[[], Any]) -> Any:
        t('botapp.bootstrap.container.DependencyContainer._resolve')
        if key not in self._cache:
            self._cache[key] = factory()
        return self._cache[key]

    @property
    def api_client(self) -> ReservationApiClient:
        t('botapp.bootstrap.container.DependencyContainer.api_client')

        def factory() -> ReservationApiClient:
            api = self.config.court_api
            return ReservationApiClient(
                api.api_url,
                club_context=ClubContext(club_id=api.club_id, auth_token=api.api_token),
                timeout_seconds=api.timeout_seconds,
            )

        return self._resolve('api_client', factory)

    @property
    def clock(self) -> BusinessClock:
        t('botapp.bootstrap.container.DependencyContainer.clock')
        return self._resolve('clock', lambda: BusinessClock(self.config.timezone))

    @property
    def operating_hours(self) -> OperatingHours:
        t('botapp.bootstrap.container.DependencyContainer.operating_hours')
        status = self.config.status
        return self._resolve(
            'operating_hours',
            lambda: OperatingHours(open_hour=status.open_hour, close_hour=status.close_hour),
        )

    @property
    def poller(self) -> CourtStatusPoller:
        t('botapp.bootstrap.container.DependencyContainer.poller')

        def factory() -> CourtStatusPoller:
            return CourtStatusPoller(
                self.api_client,
                self.clock,
                hours=self.operating_hours,
                poll_interval=self.config.poll_interval,
            )

        return self._resolve('poller', factory)

    @property
    def subscribers(self) -> SubscriberStore:
        t('botapp.bootstrap.container.DependencyContainer.subscribers')
        return self._resolve('subscribers', lambda: SubscriberStore(self.config.paths.subscribers_file))

    @property
    def notifier(self) -> StatusChangeNotifier:
        t('botapp.bootstrap.container.DependencyContainer.notifier')
        return self._resolve('notifier', lambda: StatusChangeNotifier(self.subscribers))

    @property
    def status_handler(self) -> CourtStatusHandler:
        t('botapp.bootstrap.container.DependencyContainer.status_handler')
        return self._resolve('status_handler', lambda: CourtStatusHandler(self.poller, self.subscribers))

    def build_dependencies(self) -> BotDependencies:
        """Resolve every runtime component into a frozen snapshot."""
        t('botapp.bootstrap.container.DependencyContainer.build_dependencies')
        return BotDependencies(
            config=self.config,
            api_client=self.api_client,
            clock=self.clock,
            poller=self.poller,
            subscribers=self.subscribers,
            notifier=self.notifier,
            status_handler=self.status_handler,
        )


__all__ = ['BotDependencies', 'DependencyContainer']
