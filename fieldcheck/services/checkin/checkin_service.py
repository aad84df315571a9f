"""
Check-in submission service.

Builds check-in events in the fixed check-in timezone and submits them
to the SaveData endpoint, classifying the server's answer.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Tuple

import httpx
import pytz
from pydantic import ValidationError

from common.location import Position
from config.checkin_config import (
    CHECKIN_TIMEZONE,
    DATE_FORMAT,
    DUPLICATE_STATUS_CODES,
    MESSAGES,
    SAVE_DATA_PATH,
    TIME_FORMAT,
)
from fieldcheck.schemas.checkin import SaveDataResponse
from fieldcheck.types import CheckInEvent, CheckInType, Outcome, OutcomeStatus, PlaceInfo, User

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CheckInService:
    """
    Handles check-in event construction and delivery.
    Keeps no local history; the server enforces one event per type per day.
    """

    def __init__(
        self,
        base_url: str,
        timezone_name: str = CHECKIN_TIMEZONE,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], datetime] = _utc_now
    ):
        """
        Initialize CheckInService.

        Args:
            base_url: Backend base URL
            timezone_name: IANA zone used for the event date and time
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests, mock backend)
            clock: Returns the current instant (naive values are taken as UTC)
        """
        self._save_url = f"{base_url.rstrip('/')}{SAVE_DATA_PATH}"
        self._tz = pytz.timezone(timezone_name)
        self._timeout = timeout
        self._transport = transport
        self._clock = clock

    def local_date_time(self) -> Tuple[str, str]:
        """
        Current date and time in the check-in timezone.

        Returns:
            tuple of ("YYYY-MM-DD", "HH:MM:SS")
        """
        now = self._clock()
        if now.tzinfo is None:
            now = pytz.utc.localize(now)
        local = now.astimezone(self._tz)
        return local.strftime(DATE_FORMAT), local.strftime(TIME_FORMAT)

    def build_event(
        self,
        check_type: CheckInType,
        user: Optional[User],
        position: Optional[Position],
        place: PlaceInfo
    ) -> CheckInEvent:
        """
        Build an event stamped with the current local date and time.

        Raises:
            InvalidInputException: User or Position missing
        """
        date, time = self.local_date_time()
        return CheckInEvent.build(
            check_type=check_type,
            date=date,
            time=time,
            user=user,
            position=position,
            place=place,
        )

    async def submit(self, event: CheckInEvent) -> Outcome:
        """
        Send an event to the SaveData endpoint.

        Args:
            event: The event to record

        Returns:
            Outcome with status SUCCESS, DUPLICATE_REJECTED or SUBMISSION_FAILED
        """
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout
            ) as client:
                response = await client.post(self._save_url, json=event.to_payload())
        except httpx.HTTPError as e:
            logger.error(f"Check-{event.type.value} request failed: {e}")
            return self._failed()

        body = self._parse_body(response)
        message = body.message if body else None

        if response.status_code in DUPLICATE_STATUS_CODES:
            logger.info(f"Check-{event.type.value} for {event.user_email} on {event.date} rejected: {message}")
            return self._duplicate(message)

        if not response.is_success or body is None:
            logger.error(f"Check-{event.type.value} failed: {response.status_code} {response.text[:200]}")
            return self._failed(message)

        if body.status == "success":
            logger.info(f"Check-{event.type.value} recorded for {event.user_email} on {event.date} at {event.place_name}")
            title, text = MESSAGES["success"]
            return Outcome(
                status=OutcomeStatus.SUCCESS,
                title=title,
                message=text.format(type=event.type.value, place=event.place_name),
                place_name=event.place_name,
            )

        if not message or "already" in message.lower():
            logger.info(f"Check-{event.type.value} for {event.user_email} on {event.date} already recorded")
            return self._duplicate(message)

        logger.warning(f"Check-{event.type.value} rejected: {message}")
        return self._failed(message)

    @staticmethod
    def _parse_body(response: httpx.Response) -> Optional[SaveDataResponse]:
        try:
            return SaveDataResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            return None

    @staticmethod
    def _duplicate(message: Optional[str]) -> Outcome:
        title, default = MESSAGES["duplicate"]
        return Outcome(
            status=OutcomeStatus.DUPLICATE_REJECTED,
            title=title,
            message=message or default,
        )

    @staticmethod
    def _failed(message: Optional[str] = None) -> Outcome:
        title, default = MESSAGES["submission_failed"]
        return Outcome(
            status=OutcomeStatus.SUBMISSION_FAILED,
            title=title,
            message=message or default,
        )
