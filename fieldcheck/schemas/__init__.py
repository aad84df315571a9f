"""
FieldCheck Schemas.

Pydantic models for collaborator request/response validation.
"""

from fieldcheck.schemas.auth import *
from fieldcheck.schemas.checkin import *
from fieldcheck.schemas.geocode import *
