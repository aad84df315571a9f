"""
Session state and its transition functions.

SessionState is immutable; every change produces a new value through one
of the functions below, so partial resets cannot happen.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from common.location import Position
from fieldcheck.types import Outcome, User


class SessionPhase(str, Enum):
    """Where the session is in the login/location/submission flow."""
    LOGGED_OUT = "logged_out"
    AUTHENTICATING = "authenticating"
    LOCATION_PENDING = "location_pending"
    LOCATION_READY = "location_ready"
    SUBMITTING = "submitting"


LOGGED_IN_PHASES = frozenset({
    SessionPhase.LOCATION_PENDING,
    SessionPhase.LOCATION_READY,
    SessionPhase.SUBMITTING,
})


class InvalidTransitionError(ValueError):
    """A transition was applied to a state it does not start from."""


@dataclass(frozen=True)
class SessionState:
    """Everything the session knows, as one value."""
    phase: SessionPhase = SessionPhase.LOGGED_OUT
    email: str = ""
    password: str = field(default="", repr=False)
    user: Optional[User] = None
    position: Optional[Position] = None
    is_fetching_location: bool = False
    location_error: Optional[Outcome] = None
    notification: Optional[Outcome] = None
    epoch: int = 0  # bumped on logout

    @property
    def is_logged_in(self) -> bool:
        return self.phase in LOGGED_IN_PHASES


def _require(state: SessionState, *phases: SessionPhase) -> None:
    if state.phase not in phases:
        allowed = ", ".join(p.value for p in phases)
        raise InvalidTransitionError(f"Cannot leave {state.phase.value}; expected one of: {allowed}")


def initial_state() -> SessionState:
    return SessionState()


def with_credentials(
    state: SessionState,
    email: Optional[str] = None,
    password: Optional[str] = None
) -> SessionState:
    _require(state, SessionPhase.LOGGED_OUT)
    return replace(
        state,
        email=state.email if email is None else email,
        password=state.password if password is None else password,
    )


def start_authentication(state: SessionState) -> SessionState:
    _require(state, SessionPhase.LOGGED_OUT)
    return replace(state, phase=SessionPhase.AUTHENTICATING, notification=None)


def authentication_failed(state: SessionState, outcome: Outcome) -> SessionState:
    _require(state, SessionPhase.AUTHENTICATING)
    return replace(state, phase=SessionPhase.LOGGED_OUT, notification=outcome)


def authenticated(state: SessionState, user: User) -> SessionState:
    """Enter LOCATION_PENDING; the caller runs location acquisition next."""
    _require(state, SessionPhase.AUTHENTICATING)
    return replace(
        state,
        phase=SessionPhase.LOCATION_PENDING,
        user=user,
        position=None,
        location_error=None,
    )


def location_fetch_started(state: SessionState) -> SessionState:
    _require(state, SessionPhase.LOCATION_PENDING, SessionPhase.LOCATION_READY)
    return replace(
        state,
        phase=SessionPhase.LOCATION_PENDING,
        position=None,
        is_fetching_location=True,
        location_error=None,
    )


def location_acquired(state: SessionState, position: Position) -> SessionState:
    _require(state, SessionPhase.LOCATION_PENDING)
    return replace(
        state,
        phase=SessionPhase.LOCATION_READY,
        position=position,
        is_fetching_location=False,
        location_error=None,
    )


def location_failed(state: SessionState, outcome: Outcome) -> SessionState:
    _require(state, SessionPhase.LOCATION_PENDING)
    return replace(
        state,
        position=None,
        is_fetching_location=False,
        location_error=outcome,
        notification=outcome,
    )


def submission_started(state: SessionState) -> SessionState:
    _require(state, SessionPhase.LOCATION_READY)
    return replace(state, phase=SessionPhase.SUBMITTING, notification=None)


def submission_finished(state: SessionState, outcome: Outcome) -> SessionState:
    _require(state, SessionPhase.SUBMITTING)
    return replace(state, phase=SessionPhase.LOCATION_READY, notification=outcome)


def notify(state: SessionState, outcome: Outcome) -> SessionState:
    return replace(state, notification=outcome)


def logged_out(state: SessionState, outcome: Optional[Outcome] = None) -> SessionState:
    """Reset everything; any phase may log out."""
    return SessionState(epoch=state.epoch + 1, notification=outcome)
