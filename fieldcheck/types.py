"""
Type definitions for the check-in client.

Contains the dataclasses passed between the services and the session layer.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Dict, Any

from common.location import Position
from common.utils.exceptions import InvalidInputException
from config.checkin_config import UNKNOWN_CODE, UNKNOWN_PLACE

__all__ = [
    "CheckInType",
    "User",
    "Position",
    "PlaceInfo",
    "CheckInEvent",
    "OutcomeStatus",
    "Outcome",
]


class CheckInType(str, Enum):
    """Direction of an attendance event."""
    IN = "in"
    OUT = "out"


@dataclass(frozen=True)
class User:
    """Identity returned by the login server."""
    name: str
    email: str
    photo: Optional[str] = None


@dataclass(frozen=True)
class PlaceInfo:
    """Human-readable place for a coordinate pair."""
    place_name: str = UNKNOWN_PLACE
    compound_code: str = UNKNOWN_CODE


@dataclass(frozen=True)
class CheckInEvent:
    """A single dated, typed, geolocated attendance record."""
    type: CheckInType
    date: str  # YYYY-MM-DD in the check-in timezone
    time: str  # HH:MM:SS in the check-in timezone
    latitude: float
    longitude: float
    place_name: str
    compound_code: str
    user_name: str
    user_email: str

    @classmethod
    def build(
        cls,
        check_type: CheckInType,
        date: str,
        time: str,
        user: Optional[User],
        position: Optional[Position],
        place: PlaceInfo,
    ) -> "CheckInEvent":
        """
        Assemble an event from the session's user and position.

        Raises:
            InvalidInputException: User or a valid Position is missing
        """
        if user is None:
            raise InvalidInputException("Cannot build a check-in without a user")
        if position is None or not position.is_valid():
            raise InvalidInputException("Cannot build a check-in without a valid position")

        return cls(
            type=CheckInType(check_type),
            date=date,
            time=time,
            latitude=position.latitude,
            longitude=position.longitude,
            place_name=place.place_name,
            compound_code=place.compound_code,
            user_name=user.name,
            user_email=user.email,
        )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize in the SaveData wire format."""
        return {
            "type": self.type.value,
            "date": self.date,
            "time": self.time,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "placeName": self.place_name,
            "compoundCode": self.compound_code,
            "userName": self.user_name,
            "userEmail": self.user_email,
        }


class OutcomeStatus(str, Enum):
    """Result of a session operation."""
    # ok
    LOGGED_IN = "logged_in"
    LOCATION_READY = "location_ready"
    SUCCESS = "success"
    LOGGED_OUT = "logged_out"
    # rejected locally
    INVALID_INPUT = "invalid_input"
    INVALID_STATE = "invalid_state"
    LOCATION_UNAVAILABLE = "location_unavailable"
    LOCATION_IN_PROGRESS = "location_in_progress"
    SUBMISSION_IN_PROGRESS = "submission_in_progress"
    # failures
    AUTH_FAILED = "auth_failed"
    NETWORK_ERROR = "network_error"
    UNSUPPORTED_ENVIRONMENT = "unsupported_environment"
    PERMISSION_DENIED = "permission_denied"
    LOCATION_FETCH_FAILED = "location_fetch_failed"
    SUBMISSION_FAILED = "submission_failed"
    SESSION_ENDED = "session_ended"
    # business rule
    DUPLICATE_REJECTED = "duplicate_rejected"


OK_STATUSES = frozenset({
    OutcomeStatus.LOGGED_IN,
    OutcomeStatus.LOCATION_READY,
    OutcomeStatus.SUCCESS,
    OutcomeStatus.LOGGED_OUT,
})


@dataclass(frozen=True)
class Outcome:
    """Typed result of a controller operation, shown as one notification."""
    status: OutcomeStatus
    title: str = ""
    message: str = ""
    place_name: Optional[str] = None
    user: Optional[User] = None

    @property
    def ok(self) -> bool:
        return self.status in OK_STATUSES

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data
