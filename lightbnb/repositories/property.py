"""
Property repository for listing inserts and filtered search.
Search statements are assembled from a predicate list so each filter
composes with the others.
"""

from sqlalchemy import select, insert, func, and_
from sqlalchemy.sql import Select
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property
from lightbnb.models.reservation import PropertyReview
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyRecord,
    PropertyWithRating,
    PropertySearchFilters,
)
from lightbnb.utils.money import to_cents
from typing import List, Optional, Union
import logging

logger = logging.getLogger(__name__)


def build_filter_conditions(filters: PropertySearchFilters) -> List:
    """
    Build WHERE conditions from search filters.

    The order of the returned list is the order placeholders are rendered,
    and therefore the order of the bound parameters.

    Args:
        filters: PropertySearchFilters instance

    Returns:
        List of SQLAlchemy conditions
    """
    conditions = []

    # City filter (case-insensitive substring, LIKE wildcards matched literally)
    if filters.city:
        conditions.append(Property.city.icontains(filters.city, autoescape=True))

    if filters.owner_id is not None:
        conditions.append(Property.owner_id == filters.owner_id)

    # Price range filters, converted from dollars to stored cents
    if filters.minimum_price_per_night is not None:
        conditions.append(Property.cost_per_night >= to_cents(filters.minimum_price_per_night))
    if filters.maximum_price_per_night is not None:
        conditions.append(Property.cost_per_night <= to_cents(filters.maximum_price_per_night))

    return conditions


def build_search_query(filters: PropertySearchFilters, limit: int = 10) -> Select:
    """
    Build the property search statement.

    Properties are grouped with their reviews to compute ``average_rating``.
    A minimum rating becomes a HAVING clause; without one, results are
    ordered by nightly price, cheapest first.

    Args:
        filters: Search filters, any of which may be absent
        limit: Maximum number of rows

    Returns:
        Select statement ready for execution
    """
    average_rating = func.avg(PropertyReview.rating)

    query = (
        select(Property.__table__, average_rating.label("average_rating"))
        .outerjoin(PropertyReview, PropertyReview.property_id == Property.id)
    )

    conditions = build_filter_conditions(filters)
    if conditions:
        query = query.where(and_(*conditions))

    query = query.group_by(Property.id)

    if filters.minimum_rating is not None:
        query = query.having(average_rating >= filters.minimum_rating)
    else:
        query = query.order_by(Property.cost_per_night.asc())

    return query.limit(limit)


class PropertyRepository(BaseRepository):
    """
    Repository for property listings.
    """

    async def create_property(self, property_in: PropertyCreate) -> PropertyRecord:
        """
        Insert an active listing and return the stored row.

        Args:
            property_in: Listing details with the price in dollars

        Returns:
            The inserted property, including its id and price in cents
        """
        values = property_in.model_dump(exclude={"cost_per_night"})
        values["cost_per_night"] = to_cents(property_in.cost_per_night)
        values["active"] = True

        stmt = insert(Property).values(**values).returning(*Property.__table__.c)
        row = await self.insert_returning(stmt, "create property")

        created = PropertyRecord.model_validate(row)
        logger.info(f"Created property: {created.title} (ID: {created.id})")
        return created

    async def get_property(self, property_id: Union[int, str]) -> Optional[PropertyRecord]:
        """
        Get a property by id.

        Returns:
            Property record if found, None otherwise
        """
        query = select(Property.__table__).where(Property.id == int(property_id))
        row = await self.fetch_one(query, "get property")
        return PropertyRecord.model_validate(row) if row else None

    async def search_properties(
        self,
        filters: Optional[PropertySearchFilters] = None,
        limit: int = 10
    ) -> List[PropertyWithRating]:
        """
        Search properties with optional filters.

        Args:
            filters: PropertySearchFilters instance, None for no filtering
            limit: Maximum number of records to return

        Returns:
            Properties with their average rating
        """
        filters = filters or PropertySearchFilters()
        query = build_search_query(filters, int(limit))
        rows = await self.fetch_all(query, "search properties")
        return [PropertyWithRating.model_validate(row) for row in rows]
