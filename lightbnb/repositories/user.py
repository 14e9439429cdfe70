"""
User repository for account lookups and sign-up inserts.
"""

from sqlalchemy import select, insert
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from lightbnb.schemas.user import UserCreate, UserRecord
from typing import Optional, Union
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    """Repository for the users table."""

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        """
        Get user by email address (exact match).

        Args:
            email: Email to look up

        Returns:
            User record if found, None otherwise
        """
        query = select(User.__table__).where(User.email == email)
        row = await self.fetch_one(query, "get user by email")
        return UserRecord.model_validate(row) if row else None

    async def get_by_id(self, user_id: Union[int, str]) -> Optional[UserRecord]:
        """
        Get user by id.

        Args:
            user_id: User id; numeric strings are accepted

        Returns:
            User record if found, None otherwise
        """
        query = select(User.__table__).where(User.id == int(user_id))
        row = await self.fetch_one(query, "get user by id")
        return UserRecord.model_validate(row) if row else None

    async def create_user(self, user: UserCreate) -> UserRecord:
        """
        Insert a user and return the stored row.

        Args:
            user: Name, email and (already hashed) password

        Returns:
            The inserted user including its generated id
        """
        stmt = (
            insert(User)
            .values(name=user.name, email=user.email, password=user.password)
            .returning(*User.__table__.c)
        )
        row = await self.insert_returning(stmt, "create user")
        created = UserRecord.model_validate(row)
        logger.info(f"Created user: {created.email} (ID: {created.id})")
        return created
