"""
Pydantic models for the Google reverse geocoding response.

Only the fields the place enricher reads are declared.
"""

from typing import Optional, List
from pydantic import BaseModel


class PlusCode(BaseModel):
    compound_code: Optional[str] = None
    global_code: Optional[str] = None


class GeocodeResult(BaseModel):
    formatted_address: Optional[str] = None
    plus_code: Optional[PlusCode] = None


class GeocodeResponse(BaseModel):
    """Response body for GET /maps/api/geocode/json"""
    status: Optional[str] = None
    error_message: Optional[str] = None
    results: List[GeocodeResult] = []
