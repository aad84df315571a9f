"""
Pydantic models for the Login collaborator.
"""

from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Request Schemas
# =============================================================================

class LoginRequest(BaseModel):
    """POST /api/login"""
    username: str = Field(..., description="User email")
    password: str


# =============================================================================
# Response Schemas
# =============================================================================

class LoginUser(BaseModel):
    """User block of a successful login."""
    name: str
    email: str
    photo: Optional[str] = None


class LoginResponse(BaseModel):
    """Response body for POST /api/login"""
    status: Optional[str] = None
    message: Optional[str] = None
    user: Optional[LoginUser] = None
