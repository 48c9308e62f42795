from __future__ import annotations

import httpx
import pytest

from lineup.client import ThunderInsightsClient
from lineup.config import Settings
from lineup.errors import HttpStatusError, MalformedResponseError, TransportError

_SETTINGS = Settings(
    api_base_url="https://stats.test/api/v1",
    asset_base_url="https://stats.test",
    http_timeout_s=1.0,
)

_VEHICLE = {
    "VehicleID": 42,
    "VehicleName": "M4A1 (76) W",
    "Tier": 3,
    "Battlerating": 5.3,
    "OperatorCountry": "usa",
    "VehicleIdentifiyingName": "US_M4A1_76W_Sherman",
    "Premium": False,
    "Gift": True,
    "Kills": 12,
}


def _client(handler) -> ThunderInsightsClient:
    return ThunderInsightsClient(_SETTINGS, transport=httpx.MockTransport(handler))


def test_search_player_sends_name_and_limit() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"UserID": 1234, "Nick": "ace & co"}])

    with _client(handler) as client:
        player = client.search_player("ace & co")

    assert player is not None
    assert player.user_id == 1234
    assert player.name == "ace & co"
    assert seen[0].url.path == "/api/v1/players/search"
    assert seen[0].url.params["userToSearchFor"] == "ace & co"
    assert seen[0].url.params["limit"] == "1"


@pytest.mark.parametrize("payload", [[], {}])
def test_search_player_empty_payload_is_not_found(payload) -> None:
    with _client(lambda request: httpx.Response(200, json=payload)) as client:
        assert client.search_player("nobody") is None


def test_fetch_vehicle_stats_parses_records() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/v1/players/vehicleStats/1234"
        return httpx.Response(200, json=[_VEHICLE])

    with _client(handler) as client:
        records = client.fetch_vehicle_stats(1234)

    assert len(records) == 1
    record = records[0]
    assert record.vehicle_id == 42
    assert record.battle_rating == 5.3
    assert record.identifying_name == "US_M4A1_76W_Sherman"
    assert record.gift is True
    assert record.clan is False


def test_fetch_vehicle_stats_empty_payload() -> None:
    with _client(lambda request: httpx.Response(200, json=[])) as client:
        assert client.fetch_vehicle_stats(1) == []


def test_malformed_vehicle_payload_is_rejected() -> None:
    broken = {k: v for k, v in _VEHICLE.items() if k != "Tier"}

    with _client(lambda request: httpx.Response(200, json=[broken])) as client:
        with pytest.raises(MalformedResponseError):
            client.fetch_vehicle_stats(1)


def test_non_json_body_is_rejected() -> None:
    with _client(lambda request: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(MalformedResponseError):
            client.search_player("ace")


def test_status_error_carries_code() -> None:
    with _client(lambda request: httpx.Response(404)) as client:
        with pytest.raises(HttpStatusError) as excinfo:
            client.fetch_vehicle_stats(1)

    assert excinfo.value.status_code == 404
    assert str(excinfo.value) == "Request failed with status code 404"


def test_connection_failure_has_no_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _client(handler) as client:
        with pytest.raises(TransportError) as excinfo:
            client.search_player("ace")

    assert excinfo.value.status_code is None


def test_profile_refresh_failure_is_swallowed() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(503)

    with _client(handler) as client:
        assert client.request_profile_refresh(99) is None

    assert seen == ["/api/v1/players/update/99"]


def test_asset_urls() -> None:
    client = ThunderInsightsClient(_SETTINGS)

    assert client.flag_url("germany") == "https://stats.test/images/flags/germany.avif"
    assert (
        client.vehicle_image_url("GER_Tiger_H1")
        == "https://stats.test/images/vehicles/ger_tiger_h1.avif"
    )
    client.close()


def test_asset_urls_quote_path_segments() -> None:
    client = ThunderInsightsClient(_SETTINGS)

    assert (
        client.flag_url("x');background:red;('")
        == "https://stats.test/images/flags/x%27%29%3Bbackground%3Ared%3B%28%27.avif"
    )
    assert client.vehicle_image_url("A/B C") == "https://stats.test/images/vehicles/a%2Fb%20c.avif"
    client.close()
