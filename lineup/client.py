from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from lineup.config import Settings, get_settings
from lineup.errors import (
    ApiError,
    HttpStatusError,
    MalformedResponseError,
    TransportError,
)
from lineup.models import Player, VehicleRecord

logger = logging.getLogger(__name__)

_VEHICLE_LIST = TypeAdapter(list[VehicleRecord])


class ThunderInsightsClient:
    """Thin synchronous wrapper over the ThunderInsights player endpoints.

    No retries and no caching of API data. Every failure surfaces as an
    :class:`~lineup.errors.ApiError` subclass.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._http = httpx.Client(
            base_url=self.settings.api_base_url.rstrip("/"),
            timeout=self.settings.http_timeout_s,
            transport=transport,
        )

    def __enter__(self) -> ThunderInsightsClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    # ------------------------------------------------------------------
    # Player endpoints
    # ------------------------------------------------------------------
    def search_player(self, name: str, limit: int = 1) -> Player | None:
        data = self._get_json(
            "/players/search",
            params={"userToSearchFor": name, "limit": str(limit)},
        )
        if not data:
            return None
        if not isinstance(data, list):
            raise MalformedResponseError(
                f"Expected a list of players, got {type(data).__name__}",
                endpoint="/players/search",
            )
        try:
            return Player.model_validate(data[0])
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Invalid player payload: {exc.error_count()} error(s)",
                endpoint="/players/search",
            ) from exc

    def request_profile_refresh(self, user_id: int | str) -> None:
        endpoint = f"/players/update/{user_id}"
        try:
            self._get(endpoint)
        except ApiError as exc:
            logger.warning("Profile refresh for user %s failed: %s", user_id, exc)

    def fetch_vehicle_stats(self, user_id: int | str) -> list[VehicleRecord]:
        endpoint = f"/players/vehicleStats/{user_id}"
        data = self._get_json(endpoint)
        if not data:
            return []
        try:
            return _VEHICLE_LIST.validate_python(data)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Invalid vehicle stats payload: {exc.error_count()} error(s)",
                endpoint=endpoint,
            ) from exc

    # ------------------------------------------------------------------
    # Image assets
    # ------------------------------------------------------------------
    def flag_url(self, country: str) -> str:
        base = self.settings.asset_base_url.rstrip("/")
        return f"{base}/images/flags/{quote(country, safe='')}.avif"

    def vehicle_image_url(self, identifying_name: str) -> str:
        base = self.settings.asset_base_url.rstrip("/")
        return f"{base}/images/vehicles/{quote(identifying_name.lower(), safe='')}.avif"

    def fetch_asset(self, url: str) -> bytes:
        return self._get(url).content

    # ------------------------------------------------------------------
    # Transport helpers
    # ------------------------------------------------------------------
    def _get(self, endpoint: str, params: dict[str, str] | None = None) -> httpx.Response:
        logger.debug("GET %s params=%s", endpoint, params)
        try:
            response = self._http.get(endpoint, params=params)
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or type(exc).__name__, endpoint=endpoint) from exc
        if response.is_error:
            raise HttpStatusError(
                f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
                endpoint=endpoint,
            )
        return response

    def _get_json(self, endpoint: str, params: dict[str, str] | None = None) -> Any:
        response = self._get(endpoint, params=params)
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                "Response body is not valid JSON", endpoint=endpoint
            ) from exc
