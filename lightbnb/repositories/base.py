"""
Base repository with statement execution shared by all repositories.
Runs each statement under a timeout and turns driver errors into QueryFailure.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.engine import Result
from sqlalchemy.sql import Executable
from lightbnb.config import settings
from lightbnb.utils.exceptions import QueryFailure, QueryTimeout
from typing import Any, Dict, List, Optional
import asyncio
import logging

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base repository class providing statement execution.
    Uses async SQLAlchemy for all database operations with proper error handling.
    """

    def __init__(self, db: AsyncSession, timeout: Optional[float] = None):
        """
        Initialize repository with a database session.

        Args:
            db: Async database session
            timeout: Seconds allowed per statement, defaults to settings.query_timeout
        """
        self.db = db
        self.timeout = timeout if timeout is not None else settings.query_timeout

    async def _rollback(self, operation: str) -> None:
        """Roll back after a failed statement without masking the original error."""
        try:
            await self.db.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Rollback after {operation} failed: {e}")

    async def execute(self, statement: Executable, operation: str) -> Result:
        """
        Execute a single statement.

        Args:
            statement: SQLAlchemy statement to run
            operation: Name used in logs and in raised errors

        Returns:
            The statement's result

        Raises:
            QueryTimeout: If the statement exceeds the timeout
            QueryFailure: If the database rejects the statement
        """
        try:
            return await asyncio.wait_for(self.db.execute(statement), timeout=self.timeout)
        except asyncio.TimeoutError:
            await self._rollback(operation)
            logger.error(f"{operation} timed out after {self.timeout}s")
            raise QueryTimeout(operation, self.timeout)
        except SQLAlchemyError as e:
            await self._rollback(operation)
            logger.error(f"Failed to {operation}: {e}")
            raise QueryFailure(operation, e) from e

    async def fetch_one(self, statement: Executable, operation: str) -> Optional[Dict[str, Any]]:
        """
        Execute a statement and return its first row as a mapping.

        Returns:
            Row mapping if a row matched, None otherwise
        """
        result = await self.execute(statement, operation)
        row = result.mappings().first()

        if row is None:
            logger.debug(f"{operation}: no matching row")
            return None

        logger.debug(f"{operation}: row found")
        return dict(row)

    async def fetch_all(self, statement: Executable, operation: str) -> List[Dict[str, Any]]:
        """
        Execute a statement and return all rows as mappings.
        """
        result = await self.execute(statement, operation)
        rows = [dict(row) for row in result.mappings().all()]

        logger.debug(f"{operation}: retrieved {len(rows)} rows")
        return rows

    async def insert_returning(self, statement: Executable, operation: str) -> Dict[str, Any]:
        """
        Execute an INSERT ... RETURNING statement and commit it.

        Returns:
            The inserted row, including generated columns

        Raises:
            QueryFailure: If the insert or the commit fails
        """
        result = await self.execute(statement, operation)
        row = dict(result.mappings().one())

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._rollback(operation)
            logger.error(f"Failed to commit {operation}: {e}")
            raise QueryFailure(operation, e) from e

        return row
