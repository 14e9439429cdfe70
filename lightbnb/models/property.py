"""
Property model mapping the properties table.
Prices are stored in cents; see lightbnb.utils.money for conversion.
"""

from sqlalchemy import String, Text, Integer, Boolean, ForeignKey, true
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base
from typing import Optional


class Property(Base):
    """
    A rental listing owned by a user.
    Mirrors the externally managed properties schema column for column.
    """

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Listing details
    title: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    thumbnail_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)

    cover_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)

    # Pricing, in cents
    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Nightly price in cents",
    )

    # Specifications
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Address
    country: Mapped[str] = mapped_column(String(255), nullable=False)

    street: Mapped[str] = mapped_column(String(255), nullable=False)

    city: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    province: Mapped[str] = mapped_column(String(255), nullable=False)

    post_code: Mapped[str] = mapped_column(String(255), nullable=False)

    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )
