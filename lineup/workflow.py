"""Search workflow: explicit view state, reducer transitions and orchestration.

A search moves through ``IDLE -> SEARCHING -> {SUCCESS, NOT_FOUND,
REFRESH_PENDING, FAILED}``. Every completion event carries the sequence number
of the submission that produced it; the reducer drops events whose number is
no longer current, so a slow earlier search cannot overwrite a newer one.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field, replace
from typing import Protocol

import httpx

from lineup.errors import ApiError
from lineup.models import Player, VehicleRecord
from lineup.normalize import normalize_vehicles

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "This field is required"
NOT_FOUND_MESSAGE = "No player with this name was found."
REFRESH_PENDING_MESSAGE = "Player data update requested, try again later."
GENERIC_ERROR_MESSAGE = "An error occurred while processing your request."


class Phase(str, enum.Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    REFRESH_PENDING = "refresh_pending"
    FAILED = "failed"


@dataclass(frozen=True)
class ViewState:
    phase: Phase = Phase.IDLE
    error: str | None = None
    field_error: str | None = None
    player: Player | None = None
    vehicles: tuple[VehicleRecord, ...] = ()
    request_seq: int = 0
    snapshot: bytes | None = field(default=None, repr=False)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class InputChanged:
    pass


@dataclass(frozen=True)
class ValidationFailed:
    message: str


@dataclass(frozen=True)
class Submitted:
    name: str


@dataclass(frozen=True)
class PlayerNotFound:
    seq: int


@dataclass(frozen=True)
class PlayerFound:
    seq: int
    player: Player


@dataclass(frozen=True)
class VehicleStatsEmpty:
    seq: int


@dataclass(frozen=True)
class VehicleStatsReceived:
    seq: int
    vehicles: tuple[VehicleRecord, ...]


@dataclass(frozen=True)
class SearchFailed:
    seq: int
    message: str


@dataclass(frozen=True)
class SnapshotCaptured:
    png: bytes


Event = (
    InputChanged
    | ValidationFailed
    | Submitted
    | PlayerNotFound
    | PlayerFound
    | VehicleStatsEmpty
    | VehicleStatsReceived
    | SearchFailed
    | SnapshotCaptured
)

_COMPLETIONS = (PlayerNotFound, PlayerFound, VehicleStatsEmpty, VehicleStatsReceived, SearchFailed)


def reduce(state: ViewState, event: Event) -> ViewState:
    """Return the state that results from applying *event* to *state*."""
    if isinstance(event, _COMPLETIONS) and event.seq != state.request_seq:
        logger.debug(
            "Dropping stale %s for search #%s (current #%s)",
            type(event).__name__,
            event.seq,
            state.request_seq,
        )
        return state

    if isinstance(event, InputChanged):
        return replace(state, error=None, field_error=None)
    if isinstance(event, ValidationFailed):
        return replace(state, field_error=event.message)
    if isinstance(event, Submitted):
        return ViewState(phase=Phase.SEARCHING, request_seq=state.request_seq + 1)
    if isinstance(event, PlayerNotFound):
        return replace(state, phase=Phase.NOT_FOUND, error=NOT_FOUND_MESSAGE)
    if isinstance(event, PlayerFound):
        return replace(state, player=event.player)
    if isinstance(event, VehicleStatsEmpty):
        return replace(state, phase=Phase.REFRESH_PENDING, error=REFRESH_PENDING_MESSAGE)
    if isinstance(event, VehicleStatsReceived):
        return replace(state, phase=Phase.SUCCESS, vehicles=event.vehicles)
    if isinstance(event, SearchFailed):
        return replace(state, phase=Phase.FAILED, error=event.message)
    if isinstance(event, SnapshotCaptured):
        return replace(state, snapshot=event.png)
    raise TypeError(f"Unknown event: {event!r}")


class ViewStore:
    """Holds the current :class:`ViewState`; the only place it changes."""

    def __init__(self, state: ViewState | None = None) -> None:
        self._state = state or ViewState()

    @property
    def state(self) -> ViewState:
        return self._state

    def dispatch(self, event: Event) -> ViewState:
        self._state = reduce(self._state, event)
        return self._state


class PlayerStatsSource(Protocol):
    def search_player(self, name: str, limit: int = 1) -> Player | None: ...

    def request_profile_refresh(self, user_id: int | str) -> None: ...

    def fetch_vehicle_stats(self, user_id: int | str) -> list[VehicleRecord]: ...


def validate_name(name: str) -> str | None:
    return REQUIRED_MESSAGE if not name else None


def describe_error(exc: Exception) -> str:
    """Turn an API failure into the banner message; never raises."""
    try:
        status = getattr(exc, "status_code", None)
        if status is None:
            raise ValueError("error carries no HTTP status")
        reason = httpx.codes.get_reason_phrase(int(status))
        if not reason:
            raise ValueError(f"no reason phrase for status {status}")
        return f"{exc} ({reason})."
    except Exception as err:  # noqa: BLE001
        logger.info("An error occurred while processing your request:\n%s", err)
        return GENERIC_ERROR_MESSAGE


class SearchWorkflow:
    def __init__(self, client: PlayerStatsSource, store: ViewStore) -> None:
        self.client = client
        self.store = store

    def input_changed(self) -> ViewState:
        return self.store.dispatch(InputChanged())

    def submit(self, name: str) -> ViewState:
        message = validate_name(name)
        if message is not None:
            return self.store.dispatch(ValidationFailed(message))

        seq = self.store.dispatch(Submitted(name)).request_seq
        try:
            player = self.client.search_player(name, limit=1)
            if player is None:
                return self.store.dispatch(PlayerNotFound(seq))
            self.store.dispatch(PlayerFound(seq, player))

            self.client.request_profile_refresh(player.user_id)
            records = self.client.fetch_vehicle_stats(player.user_id)
            if not records:
                return self.store.dispatch(VehicleStatsEmpty(seq))
            return self.store.dispatch(VehicleStatsReceived(seq, normalize_vehicles(records)))
        except ApiError as exc:
            logger.debug("Search #%s for %r failed: %s", seq, name, exc)
            return self.store.dispatch(SearchFailed(seq, describe_error(exc)))
