"""
Query gateway exposing the data operations used by the web layer.
Accepts plain data or schema instances and returns pydantic records.
"""

from typing import Any, Dict, List, Optional, Union
from sqlalchemy.ext.asyncio import AsyncSession
from lightbnb.config import settings
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.schemas.user import UserCreate, UserRecord
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyRecord,
    PropertyWithRating,
    PropertySearchFilters,
)
from lightbnb.schemas.reservation import ReservationWithProperty
import logging

logger = logging.getLogger(__name__)


class QueryGateway:
    """
    Single entry point for LightBnB data access.

    Every method is one statement round trip. Absent rows come back as None
    or an empty list; failures raise QueryFailure.
    """

    def __init__(self, db_session: AsyncSession, timeout: Optional[float] = None):
        self.db = db_session
        self.user_repo = UserRepository(db_session, timeout)
        self.property_repo = PropertyRepository(db_session, timeout)
        self.reservation_repo = ReservationRepository(db_session, timeout)

    # Users

    async def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        """Get a single user given their email, or None."""
        return await self.user_repo.get_by_email(email)

    async def find_user_by_id(self, user_id: Union[int, str]) -> Optional[UserRecord]:
        """Get a single user given their id, or None."""
        return await self.user_repo.get_by_id(user_id)

    async def create_user(self, user: Union[UserCreate, Dict[str, Any]]) -> UserRecord:
        """
        Add a new user.

        Args:
            user: name, email and password

        Returns:
            The stored user with its generated id
        """
        if not isinstance(user, UserCreate):
            user = UserCreate.model_validate(user)
        return await self.user_repo.create_user(user)

    # Reservations

    async def list_reservations_for_guest(
        self,
        guest_id: Union[int, str],
        limit: Optional[int] = None
    ) -> List[ReservationWithProperty]:
        """Get a guest's reservations, earliest start date first."""
        if limit is None:
            limit = settings.default_limit
        return await self.reservation_repo.get_for_guest(guest_id, limit)

    # Properties

    async def search_properties(
        self,
        filters: Union[PropertySearchFilters, Dict[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[PropertyWithRating]:
        """
        Get properties matching the given filters.

        Args:
            filters: Any of city, owner_id, minimum_price_per_night,
                maximum_price_per_night (dollars) and minimum_rating
            limit: Maximum number of results

        Returns:
            Properties with their average rating
        """
        if filters is not None and not isinstance(filters, PropertySearchFilters):
            filters = PropertySearchFilters.model_validate(filters)
        if limit is None:
            limit = settings.default_limit
        return await self.property_repo.search_properties(filters, limit)

    async def create_property(
        self,
        property_in: Union[PropertyCreate, Dict[str, Any]]
    ) -> PropertyRecord:
        """
        Add a property listing.

        Args:
            property_in: Listing details, ``cost_per_night`` in dollars

        Returns:
            The stored property with its id and price in cents
        """
        if not isinstance(property_in, PropertyCreate):
            property_in = PropertyCreate.model_validate(property_in)
        return await self.property_repo.create_property(property_in)

    async def get_property(self, property_id: Union[int, str]) -> Optional[PropertyRecord]:
        """Get a single property given its id, or None."""
        return await self.property_repo.get_property(property_id)
