"""
Pydantic schemas for gateway inputs and returned records.
"""

from lightbnb.schemas.user import UserCreate, UserRecord
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyRecord,
    PropertyWithRating,
    PropertySearchFilters,
)
from lightbnb.schemas.reservation import ReservationWithProperty

__all__ = [
    "UserCreate",
    "UserRecord",
    "PropertyCreate",
    "PropertyRecord",
    "PropertyWithRating",
    "PropertySearchFilters",
    "ReservationWithProperty",
]
