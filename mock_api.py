"""
FieldCheck Mock API Server

A FastAPI mock server that simulates the Login, SaveData and reverse
geocoding endpoints for client development and testing without the
real backend or a Google Maps API key.

Run with: uvicorn mock_api:app --port 5002 --reload

Then point the client at it:
    API_BASE_URL=http://localhost:5002
    GEOCODE_URL=http://localhost:5002/maps/api/geocode/json
"""

import logging
import math
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from fieldcheck.schemas.auth import LoginRequest
from fieldcheck.schemas.checkin import SaveDataRequest

logger = logging.getLogger(__name__)


# =============================================================================
# APP SETUP
# =============================================================================

app = FastAPI(
    title="FieldCheck Mock API",
    description="Mock API server for check-in client development",
    version="1.0.0",
)


# =============================================================================
# MOCK DATA
# =============================================================================

MOCK_USERS = {
    "a@b.com": {
        "password": "pw",
        "name": "Jo",
        "email": "a@b.com",
        "photo": None,
    },
    "user@example.com": {
        "password": "password123",
        "name": "John Doe",
        "email": "user@example.com",
        "photo": "https://example.com/photos/john.png",
    },
}

MOCK_PLACES = [
    {
        "latitude": -15.78,
        "longitude": 35.00,
        "radius_km": 5.0,
        "formatted_address": "Blantyre CBD",
        "compound_code": "6XC2+2X Blantyre, Malawi",
    },
    {
        "latitude": -13.9626,
        "longitude": 33.7741,
        "radius_km": 5.0,
        "formatted_address": "City Centre, Lilongwe, Malawi",
        "compound_code": "2QQF+XM Lilongwe, Malawi",
    },
]

# (userEmail, type, date) of every recorded event
recorded_events: set[tuple[str, str, str]] = set()


def reset_mock_state() -> None:
    """Forget all recorded events."""
    recorded_events.clear()


def _distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance between two points."""
    r = 6371.0
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    return 2 * r * math.asin(math.sqrt(a))


# =============================================================================
# AUTH ENDPOINTS
# =============================================================================


@app.post("/api/login")
async def login(body: LoginRequest):
    user = MOCK_USERS.get(body.username.lower())
    if not user or user["password"] != body.password:
        return {"status": "error", "message": "Invalid email or password"}

    return {
        "status": "success",
        "user": {
            "name": user["name"],
            "email": user["email"],
            "photo": user["photo"],
        },
    }


# =============================================================================
# CHECK-IN ENDPOINTS
# =============================================================================


@app.post("/api/savedata")
async def save_data(body: SaveDataRequest):
    key = (body.userEmail.lower(), body.type.value, body.date)
    if key in recorded_events:
        return JSONResponse(
            status_code=400,
            content={
                "status": "error",
                "message": f"You have already checked {body.type.value} today",
            },
        )

    recorded_events.add(key)
    logger.info(f"Recorded check-{body.type.value} for {body.userEmail} on {body.date} {body.time}")
    return {"status": "success", "message": "Data saved"}


@app.post("/api/mock/reset")
async def reset():
    reset_mock_state()
    return {"status": "success"}


# =============================================================================
# GEOCODE ENDPOINTS
# =============================================================================


@app.get("/maps/api/geocode/json")
async def reverse_geocode(
    latlng: str = Query(..., description="lat,lng"),
    key: Optional[str] = Query(None),
):
    try:
        lat_str, lng_str = latlng.split(",")
        lat, lng = float(lat_str), float(lng_str)
    except ValueError:
        return {
            "status": "INVALID_REQUEST",
            "error_message": "Invalid request. Invalid 'latlng' parameter.",
            "results": [],
        }

    for place in MOCK_PLACES:
        if _distance_km(lat, lng, place["latitude"], place["longitude"]) <= place["radius_km"]:
            return {
                "status": "OK",
                "results": [
                    {
                        "formatted_address": place["formatted_address"],
                        "plus_code": {"compound_code": place["compound_code"]},
                    }
                ],
            }

    return {"status": "ZERO_RESULTS", "results": []}


# =============================================================================
# ROOT
# =============================================================================


@app.get("/")
async def root():
    return {"message": "FieldCheck Mock API", "version": "1.0.0"}
