"""
Database connection and session management.
Handles async database operations with SQLAlchemy and connection pooling.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import text
from lightbnb.config import settings
from typing import AsyncGenerator
import logging

logger = logging.getLogger(__name__)


def build_engine(database_url: str, **overrides) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    PostgreSQL URLs get a sized connection pool; SQLite URLs keep the
    driver's default pool, which rejects sizing arguments.
    """
    options = {"echo": settings.debug}
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.pool_size,  # Number of connections to maintain in the pool
            max_overflow=settings.max_overflow,  # Additional connections created on demand
            pool_pre_ping=True,  # Validate connections before use
            pool_recycle=settings.pool_recycle,
            pool_timeout=settings.pool_timeout,  # Timeout for getting connection from pool
            connect_args={
                "server_settings": {
                    "application_name": "lightbnb",
                }
            },
        )
    options.update(overrides)
    return create_async_engine(database_url, **options)


engine = build_engine(settings.database_url)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for the table mappings."""

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={getattr(self, 'id', None)})>"


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get database session.
    Yields an async database session and ensures it's closed after use.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def test_database_connection() -> bool:
    """
    Test database connectivity.
    Returns True if connection is successful, False otherwise.
    """
    try:
        async with AsyncSessionLocal() as session:
            result = await session.execute(text("SELECT 1"))
            result.scalar()
            logger.info("Database connection successful")
            return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def create_tables(target_engine: AsyncEngine = None):
    """
    Create all mapped tables.
    The production schema is managed outside this package; this is for
    development databases and tests.
    """
    # Register the mappings on Base.metadata
    import lightbnb.models  # noqa: F401

    target_engine = target_engine or engine
    async with target_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")


async def drop_tables(target_engine: AsyncEngine = None):
    """
    Drop all mapped tables.
    This should only be used in testing or development.
    """
    if not settings.is_testing and not settings.is_development:
        raise RuntimeError("Cannot drop tables in production environment")

    import lightbnb.models  # noqa: F401

    target_engine = target_engine or engine
    async with target_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped successfully")


async def close_db_connection():
    """
    Close database connection.
    This should be called during application shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")


async def get_database_info() -> dict:
    """
    Get database connection information for monitoring.
    Returns connection pool status.
    """
    pool = engine.pool
    info = {"database_url": engine.url.render_as_string(hide_password=True)}
    # Only QueuePool exposes sizing counters
    for name in ("size", "checkedin", "checkedout", "overflow"):
        counter = getattr(pool, name, None)
        if counter is not None:
            info[name] = counter()
    return info
