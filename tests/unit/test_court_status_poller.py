from tracking import t

import asyncio

import pytest

from monitoring.court_status import FacilityStatus
from monitoring.court_status_poller import CourtStatusPoller
from reservations.services import ReservationFetchError
from tests.helpers import DummyLogger, FakeReservationClient, fixed_clock, make_reservation


class GatedClient:
    """Client whose responses are released manually by the test."""

    has_club_selected = True

    def __init__(self):
        t('tests.unit.test_court_status_poller.GatedClient.__init__')
        self.pending = []

    async def get_reservations_for_date(self, day):
        t('tests.unit.test_court_status_poller.GatedClient.get_reservations_for_date')
        future = asyncio.get_running_loop().create_future()
        self.pending.append(future)
        return await future


def _poller(client, **kwargs):
    t('tests.unit.test_court_status_poller._poller')
    return CourtStatusPoller(client, fixed_clock(hour=10), logger=DummyLogger(), **kwargs)


def test_non_positive_poll_interval_is_rejected():
    t('tests.unit.test_court_status_poller.test_non_positive_poll_interval_is_rejected')
    with pytest.raises(ValueError):
        _poller(FakeReservationClient([]), poll_interval=0)
    with pytest.raises(ValueError):
        _poller(FakeReservationClient([]), poll_interval=-1)


@pytest.mark.asyncio
async def test_first_refresh_notifies_and_unchanged_refresh_does_not():
    t('tests.unit.test_court_status_poller.test_first_refresh_notifies_and_unchanged_refresh_does_not')
    client = FakeReservationClient([[make_reservation(10)]])
    poller = _poller(client)
    received = []
    poller.subscribe(received.append)

    first = await poller.refresh()
    await poller.refresh()

    assert len(received) == 1
    assert received[0] is first
    assert poller.status.current.exists is True
    assert client.requested_dates[0].isoformat() == "2025-03-14"


@pytest.mark.asyncio
async def test_changed_reservations_trigger_notification():
    t('tests.unit.test_court_status_poller.test_changed_reservations_trigger_notification')
    client = FakeReservationClient([[], [make_reservation(10, players=("Juan Dela Cruz",))]])
    poller = _poller(client)
    received = []
    poller.subscribe(received.append)

    await poller.refresh()
    await poller.refresh()

    assert [status.facility_status for status in received] == [FacilityStatus.AVAILABLE, FacilityStatus.OPEN]


@pytest.mark.asyncio
async def test_async_listeners_are_awaited_and_failures_isolated():
    t('tests.unit.test_court_status_poller.test_async_listeners_are_awaited_and_failures_isolated')
    poller = _poller(FakeReservationClient())
    received = []

    def broken(status):
        raise RuntimeError("listener exploded")

    async def collector(status):
        received.append(status)

    poller.subscribe(broken)
    poller.subscribe(collector)

    await poller.refresh()

    assert len(received) == 1
    assert poller.logger.last("error") is not None


@pytest.mark.asyncio
async def test_unsubscribe_stops_notifications():
    t('tests.unit.test_court_status_poller.test_unsubscribe_stops_notifications')
    client = FakeReservationClient([[], [make_reservation(10)]])
    poller = _poller(client)
    received = []
    unsubscribe = poller.subscribe(received.append)

    await poller.refresh()
    unsubscribe()
    await poller.refresh()

    assert len(received) == 1


@pytest.mark.asyncio
async def test_fetch_error_yields_unavailable_status_and_recovers():
    t('tests.unit.test_court_status_poller.test_fetch_error_yields_unavailable_status_and_recovers')
    client = FakeReservationClient([ReservationFetchError("boom", status_code=500), [make_reservation(10)]])
    poller = _poller(client)

    failed = await poller.refresh()

    assert failed.current.time_range == "Unable to load status"
    assert failed.facility_status == FacilityStatus.AVAILABLE
    assert isinstance(poller.last_error, ReservationFetchError)

    recovered = await poller.refresh()

    assert recovered.current.exists is True
    assert poller.last_error is None


@pytest.mark.asyncio
async def test_no_club_selected_skips_fetch():
    t('tests.unit.test_court_status_poller.test_no_club_selected_skips_fetch')
    client = FakeReservationClient([[make_reservation(10)]], club_id="")
    poller = _poller(client)

    status = await poller.refresh()

    assert client.requested_dates == []
    assert status.current.time_range == ""
    assert status.next.time_range == ""
    assert status.facility_status == FacilityStatus.AVAILABLE


@pytest.mark.asyncio
async def test_stale_overlapping_refresh_is_discarded():
    t('tests.unit.test_court_status_poller.test_stale_overlapping_refresh_is_discarded')
    client = GatedClient()
    poller = _poller(client)
    received = []
    poller.subscribe(received.append)

    older = asyncio.create_task(poller.refresh())
    newer = asyncio.create_task(poller.refresh())
    while len(client.pending) < 2:
        await asyncio.sleep(0)

    assert poller.is_loading is True

    client.pending[1].set_result([make_reservation(10)])
    newest_status = await newer
    client.pending[0].set_result([])
    stale_status = await older

    assert poller.is_loading is False
    assert poller.status is newest_status
    assert stale_status.current.exists is False
    assert received == [newest_status]


@pytest.mark.asyncio
async def test_get_current_status_fetches_once_then_uses_cache():
    t('tests.unit.test_court_status_poller.test_get_current_status_fetches_once_then_uses_cache')
    client = FakeReservationClient([[make_reservation(10)]])
    poller = _poller(client)

    first = await poller.get_current_status()
    second = await poller.get_current_status()

    assert first is second
    assert len(client.requested_dates) == 1


@pytest.mark.asyncio
async def test_start_and_stop_polling():
    t('tests.unit.test_court_status_poller.test_start_and_stop_polling')
    client = FakeReservationClient()
    poller = _poller(client, poll_interval=0.01)

    await poller.start_polling()
    await poller.start_polling()

    assert poller.is_polling is True
    assert len(client.requested_dates) == 1

    await asyncio.sleep(0.05)
    await poller.stop_polling()

    assert poller.is_polling is False
    assert len(client.requested_dates) >= 2

    calls = len(client.requested_dates)
    await asyncio.sleep(0.03)
    assert len(client.requested_dates) == calls


@pytest.mark.asyncio
async def test_context_manager_starts_and_stops():
    t('tests.unit.test_court_status_poller.test_context_manager_starts_and_stops')
    poller = _poller(FakeReservationClient(), poll_interval=60)

    async with poller:
        assert poller.is_polling is True
        assert poller.status is not None

    assert poller.is_polling is False
