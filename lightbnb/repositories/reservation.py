"""
Reservation repository for a guest's booking history.
"""

from sqlalchemy import select, func
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation, PropertyReview
from lightbnb.schemas.reservation import ReservationWithProperty
from typing import List, Union
import logging

logger = logging.getLogger(__name__)


def build_guest_reservations_query(guest_id: int, limit: int):
    """
    Build the reservation listing for one guest.

    One row per reservation, carrying the property's columns and its average
    rating, earliest stay first.
    """
    property_columns = [column for column in Property.__table__.c if column.key != "id"]

    return (
        select(
            Reservation.id.label("id"),
            Reservation.guest_id,
            Reservation.start_date,
            Reservation.end_date,
            Property.id.label("property_id"),
            *property_columns,
            func.avg(PropertyReview.rating).label("average_rating"),
        )
        .select_from(Reservation)
        .join(Property, Property.id == Reservation.property_id)
        .outerjoin(PropertyReview, PropertyReview.property_id == Property.id)
        .where(Reservation.guest_id == guest_id)
        .group_by(Reservation.id, Property.id)
        .order_by(Reservation.start_date.asc())
        .limit(limit)
    )


class ReservationRepository(BaseRepository):
    """Repository for the reservations table."""

    async def get_for_guest(
        self,
        guest_id: Union[int, str],
        limit: int = 10
    ) -> List[ReservationWithProperty]:
        """
        Get a guest's reservations with property details.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of reservations to return

        Returns:
            Reservations ordered by start date ascending
        """
        query = build_guest_reservations_query(int(guest_id), int(limit))
        rows = await self.fetch_all(query, "get reservations for guest")
        return [ReservationWithProperty.model_validate(row) for row in rows]
