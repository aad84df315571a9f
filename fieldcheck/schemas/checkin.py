"""
Pydantic models for the SaveData collaborator.
"""

from typing import Optional
from pydantic import BaseModel, Field

from fieldcheck.types import CheckInType


# =============================================================================
# Request Schemas
# =============================================================================

class SaveDataRequest(BaseModel):
    """POST /api/savedata"""
    type: CheckInType
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    time: str = Field(..., pattern=r"^\d{2}:\d{2}:\d{2}$", description="HH:MM:SS")
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    placeName: str
    compoundCode: str
    userName: str
    userEmail: str


# =============================================================================
# Response Schemas
# =============================================================================

class SaveDataResponse(BaseModel):
    """Response body for POST /api/savedata"""
    status: Optional[str] = None
    message: Optional[str] = None
