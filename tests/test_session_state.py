"""Unit tests for session state transitions and the view-model projection."""

import pytest

from fieldcheck.session import state as transitions
from fieldcheck.session.state import InvalidTransitionError, SessionPhase, SessionState
from fieldcheck.session.view_model import project
from fieldcheck.types import Outcome, OutcomeStatus


@pytest.fixture
def ready_state(sample_user, sample_position):
    state = transitions.with_credentials(transitions.initial_state(), "a@b.com", "pw")
    state = transitions.start_authentication(state)
    state = transitions.authenticated(state, sample_user)
    state = transitions.location_fetch_started(state)
    return transitions.location_acquired(state, sample_position)


class TestTransitions:
    def test_initial_state_is_logged_out_and_empty(self):
        state = transitions.initial_state()

        assert state.phase == SessionPhase.LOGGED_OUT
        assert (state.email, state.password, state.user, state.position) == ("", "", None, None)
        assert state.is_logged_in is False

    def test_password_is_not_in_repr(self):
        state = transitions.with_credentials(transitions.initial_state(), "a@b.com", "s3cret")

        assert "s3cret" not in repr(state)

    def test_happy_path_reaches_location_ready(self, ready_state, sample_user, sample_position):
        assert ready_state.phase == SessionPhase.LOCATION_READY
        assert ready_state.user == sample_user
        assert ready_state.position == sample_position
        assert ready_state.is_fetching_location is False

    def test_location_failure_stays_pending(self, sample_user):
        failure = Outcome(status=OutcomeStatus.PERMISSION_DENIED, message="denied")
        state = transitions.start_authentication(transitions.initial_state())
        state = transitions.authenticated(state, sample_user)
        state = transitions.location_fetch_started(state)

        state = transitions.location_failed(state, failure)

        assert state.phase == SessionPhase.LOCATION_PENDING
        assert state.position is None
        assert state.location_error == failure

    def test_refetch_from_ready_clears_position(self, ready_state):
        state = transitions.location_fetch_started(ready_state)

        assert state.phase == SessionPhase.LOCATION_PENDING
        assert state.position is None
        assert state.is_fetching_location is True

    def test_submission_round_trip_returns_to_ready(self, ready_state, success_outcome):
        submitting = transitions.submission_started(ready_state)
        done = transitions.submission_finished(submitting, success_outcome)

        assert submitting.phase == SessionPhase.SUBMITTING
        assert done.phase == SessionPhase.LOCATION_READY
        assert done.notification == success_outcome
        assert done.position == ready_state.position

    def test_logged_out_resets_everything_and_bumps_epoch(self, ready_state):
        state = transitions.logged_out(ready_state)

        assert state == SessionState(epoch=ready_state.epoch + 1)

    @pytest.mark.parametrize("apply", [
        lambda s: transitions.submission_started(s),
        lambda s: transitions.authenticated(s, None),
        lambda s: transitions.location_fetch_started(s),
    ])
    def test_invalid_transitions_from_logged_out_raise(self, apply):
        with pytest.raises(InvalidTransitionError):
            apply(transitions.initial_state())

    def test_credentials_locked_while_logged_in(self, ready_state):
        with pytest.raises(InvalidTransitionError):
            transitions.with_credentials(ready_state, email="other@b.com")


class TestProjection:
    def test_logged_out_form(self):
        state = transitions.with_credentials(transitions.initial_state(), email="a@b.com")

        view = project(state)

        assert view.is_logged_in is False
        assert view.can_login is True
        assert view.can_check_in is False
        assert view.welcome_text is None

    def test_login_disabled_for_invalid_email(self):
        state = transitions.with_credentials(transitions.initial_state(), email="not-an-email")

        assert project(state).can_login is False

    def test_pending_shows_waiting_message(self, sample_user):
        state = transitions.start_authentication(transitions.initial_state())
        state = transitions.authenticated(state, sample_user)

        view = project(state)

        assert view.location_message == "Waiting for location..."
        assert view.can_retry_location is True
        assert view.welcome_text == "Welcome, Jo (a@b.com)"

    def test_ready_enables_check_in(self, ready_state):
        view = project(ready_state)

        assert view.can_check_in is True
        assert (view.latitude, view.longitude) == (-15.78, 35.0)
        assert view.location_message is None
        assert view.can_retry_location is True

    def test_submitting_shows_sending(self, ready_state):
        view = project(transitions.submission_started(ready_state))

        assert view.is_sending_data is True
        assert view.can_check_in is False
        assert view.can_retry_location is False

    def test_refresh_in_flight_disables_retry(self, ready_state):
        view = project(transitions.location_fetch_started(ready_state))

        assert view.can_retry_location is False
        assert view.can_check_in is False
