from tracking import t

import httpx
import pytest

from reservations.services import ReservationApiClient
from scripts import check_court_status


def _patch_client(monkeypatch, handler):
    t('tests.unit.test_check_court_status_script._patch_client')

    def factory(base_url, **kwargs):
        return ReservationApiClient(base_url, transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(check_court_status, "ReservationApiClient", factory)


@pytest.mark.asyncio
async def test_check_once_prints_status(monkeypatch, capsys):
    t('tests.unit.test_check_court_status_script.test_check_once_prints_status')
    _patch_client(monkeypatch, lambda request: httpx.Response(200, json={"reservations": []}))
    args = check_court_status.build_parser().parse_args(
        ["--api-url", "http://api.test/api", "--club-id", "club-1", "--open-hour", "0", "--close-hour", "24"]
    )

    exit_code = await check_court_status.check_once(args)

    assert exit_code == 0
    assert "*Court Status*" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_check_once_reports_failures(monkeypatch, capsys):
    t('tests.unit.test_check_court_status_script.test_check_once_reports_failures')
    _patch_client(monkeypatch, lambda request: httpx.Response(500))
    args = check_court_status.build_parser().parse_args(
        ["--api-url", "http://api.test/api", "--club-id", "club-1", "--open-hour", "0", "--close-hour", "24"]
    )

    exit_code = await check_court_status.check_once(args)

    assert exit_code == 1
    assert "Unable to load status" in capsys.readouterr().out
