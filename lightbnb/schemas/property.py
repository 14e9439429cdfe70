"""
Pydantic schemas for property listings and search filters.
Input prices are in major units; stored prices are in cents.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from typing import Optional
from decimal import Decimal
from lightbnb.utils.money import from_cents


class PropertyBase(BaseModel):
    """Listing fields shared by input and output schemas."""

    owner_id: int = Field(..., description="ID of the owning user")

    title: str = Field(..., description="Listing title", example="Speed lamp")

    description: Optional[str] = Field(None, description="Listing description")

    thumbnail_photo_url: str

    cover_photo_url: str

    parking_spaces: int = 0

    number_of_bathrooms: int = 0

    number_of_bedrooms: int = 0

    country: str

    street: str

    city: str

    province: str

    post_code: str


class PropertyCreate(PropertyBase):
    """
    Schema for inserting a property.
    ``cost_per_night`` is the nightly price in major units (dollars).
    """

    cost_per_night: Decimal = Field(
        ...,
        description="Nightly price in dollars",
        example=120.00
    )


class PropertyRecord(PropertyBase):
    """A row of the properties table."""

    id: int

    cost_per_night: int = Field(..., description="Nightly price in cents")

    active: bool = True

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def price_per_night(self) -> Decimal:
        """Nightly price in dollars."""
        return from_cents(self.cost_per_night)


class PropertyWithRating(PropertyRecord):
    """A property row with its average review rating."""

    average_rating: Optional[float] = Field(
        None,
        description="Mean review rating, None when the property has no reviews"
    )


class PropertySearchFilters(BaseModel):
    """
    Optional filters for property search.
    Prices are in dollars; empty strings from form input count as absent.
    """

    city: Optional[str] = None

    owner_id: Optional[int] = None

    minimum_price_per_night: Optional[Decimal] = None

    maximum_price_per_night: Optional[Decimal] = None

    minimum_rating: Optional[float] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v
