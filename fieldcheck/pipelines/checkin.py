"""
Check-in submission pipeline functions.

Stateless orchestration logic for one check-in or check-out.
"""

import logging
from typing import Optional

from common.location import Position
from common.utils.exceptions import GeocodeException, InvalidInputException
from config.checkin_config import MESSAGES
from fieldcheck.services.checkin.checkin_service import CheckInService
from fieldcheck.services.geocode.geocode_service import PlaceEnricher
from fieldcheck.types import CheckInType, Outcome, OutcomeStatus, User

logger = logging.getLogger(__name__)


async def submit_checkin_pipeline(
    place_enricher: PlaceEnricher,
    checkin_service: CheckInService,
    user: Optional[User],
    position: Optional[Position],
    check_type: CheckInType
) -> Outcome:
    """
    Orchestrates the check-in submission flow.

    Args:
        place_enricher: For the place name and compound code
        checkin_service: For event construction and delivery
        user: Logged-in user
        position: Current position fix
        check_type: "in" or "out"

    Returns:
        Outcome of the submission
    """
    if user is None or position is None:
        title, message = MESSAGES["location_unavailable"]
        return Outcome(status=OutcomeStatus.LOCATION_UNAVAILABLE, title=title, message=message)

    try:
        place = await place_enricher.enrich(position)
    except GeocodeException as e:
        # Only reached with the "abort" failure policy
        logger.error(f"Check-{check_type.value} aborted, geocoding failed: {e.message}")
        title, message = MESSAGES["submission_failed"]
        return Outcome(status=OutcomeStatus.SUBMISSION_FAILED, title=title, message=message)

    try:
        event = checkin_service.build_event(check_type, user, position, place)
    except InvalidInputException as e:
        logger.warning(f"Check-{check_type.value} not built: {e.message}")
        title, message = MESSAGES["location_unavailable"]
        return Outcome(status=OutcomeStatus.LOCATION_UNAVAILABLE, title=title, message=message)

    return await checkin_service.submit(event)
