"""
Projection of the session state into what a screen renders.
"""

from dataclasses import dataclass
from typing import Optional

from common.utils.validators import is_valid_email
from config.checkin_config import MESSAGES
from fieldcheck.session.state import SessionPhase, SessionState
from fieldcheck.types import Outcome


@dataclass(frozen=True)
class SessionViewModel:
    """Read-only snapshot for the presentation layer."""
    phase: SessionPhase
    is_logged_in: bool
    # login form
    email: str
    can_login: bool
    is_authenticating: bool
    # home screen
    welcome_text: Optional[str]
    user_photo: Optional[str]
    is_fetching_location: bool
    latitude: Optional[float]
    longitude: Optional[float]
    location_message: Optional[str]
    can_retry_location: bool
    can_check_in: bool
    is_sending_data: bool
    notification: Optional[Outcome]


def project(state: SessionState) -> SessionViewModel:
    """Build the view model for a state snapshot."""
    user = state.user
    position = state.position

    location_message = None
    if state.location_error is not None:
        location_message = state.location_error.message
    elif state.phase == SessionPhase.LOCATION_PENDING:
        location_message = MESSAGES["waiting_for_location"][1]

    return SessionViewModel(
        phase=state.phase,
        is_logged_in=state.is_logged_in,
        email=state.email,
        can_login=state.phase == SessionPhase.LOGGED_OUT and is_valid_email(state.email),
        is_authenticating=state.phase == SessionPhase.AUTHENTICATING,
        welcome_text=f"Welcome, {user.name} ({user.email})" if user else None,
        user_photo=user.photo if user else None,
        is_fetching_location=state.is_fetching_location,
        latitude=position.latitude if position else None,
        longitude=position.longitude if position else None,
        location_message=location_message,
        can_retry_location=(
            state.phase in (SessionPhase.LOCATION_PENDING, SessionPhase.LOCATION_READY)
            and not state.is_fetching_location
        ),
        can_check_in=state.phase == SessionPhase.LOCATION_READY and position is not None,
        is_sending_data=state.phase == SessionPhase.SUBMITTING,
        notification=state.notification,
    )
