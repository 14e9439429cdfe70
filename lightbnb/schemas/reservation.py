"""
Pydantic schemas for reservation listings.
"""

from pydantic import ConfigDict, Field
from datetime import date
from lightbnb.schemas.property import PropertyWithRating


class ReservationWithProperty(PropertyWithRating):
    """
    A guest's reservation joined with the reserved property.

    ``id`` is the reservation id; the property's own id is ``property_id``.
    """

    property_id: int

    start_date: date

    end_date: date

    guest_id: int = Field(..., description="ID of the guest holding the reservation")

    model_config = ConfigDict(from_attributes=True)
