"""Exception hierarchy for calls to the statistics API."""

from __future__ import annotations


class LineupError(Exception):
    """Base exception for all Thunder Lineup errors."""


class ApiError(LineupError):
    """A call to the statistics API did not produce a usable response."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class HttpStatusError(ApiError):
    """The API answered with a non-2xx status."""


class TransportError(ApiError):
    """Network failure before any response arrived (DNS, refused, timeout)."""


class MalformedResponseError(ApiError):
    """The response body was not JSON or did not match the expected schema."""
