"""
User model mapping the users table.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base


class User(Base):
    """A guest or property owner account."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Stored as supplied; hashing happens before the data layer is called
    password: Mapped[str] = mapped_column(String(255), nullable=False)
