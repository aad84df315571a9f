"""
Check-in client configuration constants.

These are fixed values that don't change per environment.
Environment-specific values (API keys, base URLs) are loaded from env vars.
"""

# Backend endpoints (relative to API_BASE_URL)
LOGIN_PATH = "/api/login"
SAVE_DATA_PATH = "/api/savedata"

# Google reverse geocoding
GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
GEOCODE_OK_STATUSES = ("OK", "ZERO_RESULTS")

# Events are dated in this zone regardless of device locale
CHECKIN_TIMEZONE = "Africa/Blantyre"
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"

# Place enrichment fallbacks
UNKNOWN_PLACE = "Unknown Place"
UNKNOWN_CODE = "Unknown Code"

# SaveData statuses that mean "already recorded today"
DUPLICATE_STATUS_CODES = (400, 409)

# User-facing notification texts
MESSAGES = {
    "invalid_email": ("Invalid Email", "Please enter a valid email address."),
    "login_failed": ("Login Failed", "An error occurred. Please try again."),
    "logged_in": ("Welcome", "Logged in as {name}"),
    "logged_out": ("Logged Out", "You have been logged out."),
    "unsupported_environment": (
        "Location Unavailable",
        "Oops, this will not work on an emulator. Try it on your device!",
    ),
    "permission_denied": ("Location Unavailable", "Permission to access location was denied"),
    "location_fetch_failed": ("Error", "Failed to fetch location"),
    "location_ready": ("Location", "Location acquired"),
    "location_unavailable": ("Error", "Location not available"),
    "location_in_progress": ("Location", "Location is already being fetched"),
    "waiting_for_location": ("Location", "Waiting for location..."),
    "success": ("Success", "Checked {type} successfully at {place}"),
    "duplicate": ("Check-In/Out Error", "You have already checked in/out today"),
    "submission_failed": ("Error", "Something went wrong"),
    "submission_in_progress": ("Please Wait", "A check-in is already being sent"),
    "session_ended": ("Session Ended", "You logged out before the request finished"),
    "invalid_state": ("Error", "This action is not available right now"),
}
