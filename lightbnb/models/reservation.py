"""
Reservation and review models.
Both are read-only from this package's point of view.
"""

from sqlalchemy import Date, Integer, SmallInteger, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base
from datetime import date
from typing import Optional


class Reservation(Base):
    """A guest's stay at a property."""

    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)

    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


class PropertyReview(Base):
    """A guest's rating of a property, tied to a reservation."""

    __tablename__ = "property_reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    reservation_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("reservations.id", ondelete="CASCADE"),
        nullable=False,
    )

    rating: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)

    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
