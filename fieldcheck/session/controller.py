"""
Session controller.

The single entry point for the presentation layer. Sequences login,
location acquisition and check-in submission over one SessionState and
turns every failure into an Outcome.
"""

import logging
from typing import Callable, List, Optional

from common.utils.exceptions import (
    AuthFailedException,
    LocationFetchException,
    NetworkException,
    PermissionDeniedException,
    UnsupportedEnvironmentException,
)
from common.utils.validators import is_valid_email
from config.checkin_config import MESSAGES
from fieldcheck.pipelines.checkin import submit_checkin_pipeline
from fieldcheck.services.auth.login_service import LoginService
from fieldcheck.services.checkin.checkin_service import CheckInService
from fieldcheck.services.geocode.geocode_service import PlaceEnricher
from fieldcheck.services.location.location_service import LocationService
from fieldcheck.session import state as transitions
from fieldcheck.session.state import SessionPhase, SessionState
from fieldcheck.session.view_model import SessionViewModel, project
from fieldcheck.types import CheckInType, Outcome, OutcomeStatus

logger = logging.getLogger(__name__)

StateListener = Callable[[SessionState], None]


def _outcome(status: OutcomeStatus, key: str, message: Optional[str] = None, **fmt) -> Outcome:
    title, default = MESSAGES[key]
    return Outcome(
        status=status,
        title=title,
        message=message or default.format(**fmt),
        place_name=fmt.get("place"),
        user=fmt.get("user"),
    )


class SessionController:
    """
    Owns the session state machine.

    Phases:
        LOGGED_OUT -> AUTHENTICATING -> LOCATION_PENDING -> LOCATION_READY
        LOCATION_READY -> SUBMITTING -> LOCATION_READY
        any -> LOGGED_OUT (logout)

    Operations never raise for expected failures; they return an Outcome
    and store it as the state's notification.
    """

    def __init__(
        self,
        login_service: LoginService,
        location_service: LocationService,
        place_enricher: PlaceEnricher,
        checkin_service: CheckInService
    ):
        """
        Initialize SessionController.

        Args:
            login_service: Login collaborator client
            location_service: Location acquirer
            place_enricher: Reverse geocoding with fallbacks
            checkin_service: Event construction and SaveData client
        """
        self._login_service = login_service
        self._location_service = location_service
        self._place_enricher = place_enricher
        self._checkin_service = checkin_service

        self._state = transitions.initial_state()
        self._listeners: List[StateListener] = []

    # =========================================================================
    # State access
    # =========================================================================

    @property
    def state(self) -> SessionState:
        return self._state

    def view_model(self) -> SessionViewModel:
        return project(self._state)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with every new state.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, new_state: SessionState) -> None:
        self._state = new_state
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception:
                logger.exception("Session state listener failed")

    def _notify(self, outcome: Outcome) -> Outcome:
        self._set(transitions.notify(self._state, outcome))
        return outcome

    # =========================================================================
    # Credentials
    # =========================================================================

    def set_email(self, email: str) -> None:
        if self._state.phase != SessionPhase.LOGGED_OUT:
            logger.debug("Ignoring email change outside the login form")
            return
        self._set(transitions.with_credentials(self._state, email=email))

    def set_password(self, password: str) -> None:
        if self._state.phase != SessionPhase.LOGGED_OUT:
            logger.debug("Ignoring password change outside the login form")
            return
        self._set(transitions.with_credentials(self._state, password=password))

    # =========================================================================
    # Login
    # =========================================================================

    async def login(self, email: Optional[str] = None, password: Optional[str] = None) -> Outcome:
        """
        Authenticate and, on success, acquire the first position.

        Args:
            email: Overrides the stored email field when given
            password: Overrides the stored password field when given

        Returns:
            LOGGED_IN, INVALID_INPUT, INVALID_STATE, AUTH_FAILED,
            NETWORK_ERROR or SESSION_ENDED
        """
        if self._state.phase != SessionPhase.LOGGED_OUT:
            logger.warning(f"Login ignored in phase {self._state.phase.value}")
            return self._notify(_outcome(OutcomeStatus.INVALID_STATE, "invalid_state"))

        if email is not None or password is not None:
            self._set(transitions.with_credentials(self._state, email=email, password=password))

        state = self._state
        if not is_valid_email(state.email):
            return self._notify(_outcome(OutcomeStatus.INVALID_INPUT, "invalid_email"))

        epoch = state.epoch
        self._set(transitions.start_authentication(state))

        try:
            user = await self._login_service.login(state.email, state.password)
        except AuthFailedException as e:
            return self._login_failed(epoch, _outcome(OutcomeStatus.AUTH_FAILED, "login_failed", e.message))
        except NetworkException:
            return self._login_failed(epoch, _outcome(OutcomeStatus.NETWORK_ERROR, "login_failed"))
        except Exception:
            logger.exception("Unexpected login error")
            return self._login_failed(epoch, _outcome(OutcomeStatus.NETWORK_ERROR, "login_failed"))

        if self._state.epoch != epoch:
            logger.info("Discarding login response for an ended session")
            return _outcome(OutcomeStatus.SESSION_ENDED, "session_ended")

        self._set(transitions.authenticated(self._state, user))
        logger.info(f"Session started for {user.email}")

        # Entry action of LOCATION_PENDING
        await self._acquire_location()

        if self._state.epoch != epoch:
            return _outcome(OutcomeStatus.SESSION_ENDED, "session_ended")

        return _outcome(OutcomeStatus.LOGGED_IN, "logged_in", name=user.name, user=user)

    def _login_failed(self, epoch: int, outcome: Outcome) -> Outcome:
        if self._state.epoch != epoch:
            logger.info("Discarding login failure for an ended session")
            return _outcome(OutcomeStatus.SESSION_ENDED, "session_ended")
        self._set(transitions.authentication_failed(self._state, outcome))
        return outcome

    # =========================================================================
    # Location
    # =========================================================================

    async def acquire_location(self) -> Outcome:
        """
        Re-run location acquisition after a failure or to refresh the fix.

        Returns:
            LOCATION_READY, a location failure, LOCATION_IN_PROGRESS,
            INVALID_STATE or SESSION_ENDED
        """
        if self._state.is_fetching_location:
            return self._notify(_outcome(OutcomeStatus.LOCATION_IN_PROGRESS, "location_in_progress"))

        if self._state.phase not in (SessionPhase.LOCATION_PENDING, SessionPhase.LOCATION_READY):
            return self._notify(_outcome(OutcomeStatus.INVALID_STATE, "invalid_state"))

        return await self._acquire_location()

    async def _acquire_location(self) -> Outcome:
        epoch = self._state.epoch
        self._set(transitions.location_fetch_started(self._state))

        position = None
        try:
            position = await self._location_service.acquire()
            outcome = _outcome(OutcomeStatus.LOCATION_READY, "location_ready")
        except UnsupportedEnvironmentException as e:
            outcome = _outcome(OutcomeStatus.UNSUPPORTED_ENVIRONMENT, "unsupported_environment", e.message)
        except PermissionDeniedException as e:
            outcome = _outcome(OutcomeStatus.PERMISSION_DENIED, "permission_denied", e.message)
        except LocationFetchException:
            outcome = _outcome(OutcomeStatus.LOCATION_FETCH_FAILED, "location_fetch_failed")
        except Exception:
            logger.exception("Unexpected location error")
            outcome = _outcome(OutcomeStatus.LOCATION_FETCH_FAILED, "location_fetch_failed")

        if self._state.epoch != epoch:
            logger.info("Discarding location result for an ended session")
            return _outcome(OutcomeStatus.SESSION_ENDED, "session_ended")

        if position is not None:
            self._set(transitions.location_acquired(self._state, position))
        else:
            self._set(transitions.location_failed(self._state, outcome))
        return outcome

    # =========================================================================
    # Check-in / check-out
    # =========================================================================

    async def check_in(self, check_type: CheckInType = CheckInType.IN) -> Outcome:
        return await self._submit(CheckInType(check_type))

    async def check_out(self, check_type: CheckInType = CheckInType.OUT) -> Outcome:
        return await self._submit(CheckInType(check_type))

    async def _submit(self, check_type: CheckInType) -> Outcome:
        state = self._state

        # No await between the guard and the transition below
        if state.phase == SessionPhase.SUBMITTING:
            logger.warning(f"Check-{check_type.value} rejected, a submission is in flight")
            return self._notify(_outcome(OutcomeStatus.SUBMISSION_IN_PROGRESS, "submission_in_progress"))

        if state.phase != SessionPhase.LOCATION_READY or state.position is None or state.user is None:
            return self._notify(_outcome(OutcomeStatus.LOCATION_UNAVAILABLE, "location_unavailable"))

        epoch = state.epoch
        self._set(transitions.submission_started(state))

        try:
            outcome = await submit_checkin_pipeline(
                place_enricher=self._place_enricher,
                checkin_service=self._checkin_service,
                user=state.user,
                position=state.position,
                check_type=check_type,
            )
        except Exception:
            logger.exception(f"Unexpected check-{check_type.value} error")
            outcome = _outcome(OutcomeStatus.SUBMISSION_FAILED, "submission_failed")

        if self._state.epoch != epoch:
            logger.info(f"Discarding check-{check_type.value} result for an ended session")
            return _outcome(OutcomeStatus.SESSION_ENDED, "session_ended")

        self._set(transitions.submission_finished(self._state, outcome))
        return outcome

    # =========================================================================
    # Logout
    # =========================================================================

    def logout(self) -> Outcome:
        """Clear user, position and credentials from any phase."""
        previous = self._state.phase
        outcome = _outcome(OutcomeStatus.LOGGED_OUT, "logged_out")
        self._set(transitions.logged_out(self._state, outcome))
        logger.info(f"Logged out from phase {previous.value}")
        return outcome
