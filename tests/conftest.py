"""
Test configuration and fixtures for the LightBnB data layer.
Provides database fixtures, test data factories, and common test utilities.
"""

import pytest
import uuid
from datetime import date
from typing import AsyncGenerator, List, Optional
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
import os

from lightbnb.database import create_tables, drop_tables
from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation, PropertyReview
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.services.gateway import QueryGateway


# Test database configuration
TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL",
    "sqlite+aiosqlite:///:memory:"
)


@pytest.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh schema for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False} if "sqlite" in TEST_DATABASE_URL else {}
    )
    await create_tables(engine)
    yield engine
    await drop_tables(engine)
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
            await session.close()


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    """Create a user repository instance."""
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(db_session)


@pytest.fixture
def reservation_repository(db_session: AsyncSession) -> ReservationRepository:
    """Create a reservation repository instance."""
    return ReservationRepository(db_session)


@pytest.fixture
def gateway(db_session: AsyncSession) -> QueryGateway:
    """Create a query gateway instance."""
    return QueryGateway(db_session)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        name: str = "Test User",
        email: str = None,
        password: str = "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."
    ) -> dict:
        """Create user data dictionary."""
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "password": password,
        }

    @staticmethod
    async def create_user(session: AsyncSession, **kwargs) -> User:
        """Insert a test user directly through the ORM."""
        user = User(**UserFactory.create_user_data(**kwargs))
        session.add(user)
        await session.commit()
        return user


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Speed lamp",
        description: str = "description",
        cost_per_night=120,
        city: str = "Vancouver",
        parking_spaces: int = 1,
        number_of_bathrooms: int = 1,
        number_of_bedrooms: int = 2,
    ) -> dict:
        """Create property input data; cost_per_night is in dollars."""
        return {
            "owner_id": owner_id,
            "title": title,
            "description": description,
            "thumbnail_photo_url": "https://images.example.com/thumb.jpeg",
            "cover_photo_url": "https://images.example.com/cover.jpeg",
            "cost_per_night": cost_per_night,
            "parking_spaces": parking_spaces,
            "number_of_bathrooms": number_of_bathrooms,
            "number_of_bedrooms": number_of_bedrooms,
            "country": "Canada",
            "street": "536 Namsub Highway",
            "city": city,
            "province": "British Columbia",
            "post_code": "28142",
        }

    @staticmethod
    async def create_property(
        session: AsyncSession,
        owner_id: int,
        cost_per_night_cents: int = 12000,
        **kwargs
    ) -> Property:
        """Insert a test property directly, with the price already in cents."""
        data = PropertyFactory.create_property_data(owner_id, **kwargs)
        data["cost_per_night"] = cost_per_night_cents
        property_obj = Property(**data, active=True)
        session.add(property_obj)
        await session.commit()
        return property_obj


class ReservationFactory:
    """Factory for creating reservations and their reviews."""

    @staticmethod
    async def create_reservation(
        session: AsyncSession,
        guest_id: int,
        property_id: int,
        start_date: date,
        end_date: Optional[date] = None
    ) -> Reservation:
        reservation = Reservation(
            guest_id=guest_id,
            property_id=property_id,
            start_date=start_date,
            end_date=end_date or start_date,
        )
        session.add(reservation)
        await session.commit()
        return reservation

    @staticmethod
    async def create_reviews(
        session: AsyncSession,
        guest_id: int,
        property_id: int,
        ratings: List[int]
    ) -> List[PropertyReview]:
        """Create one reservation per rating and review it."""
        reviews = []
        for index, rating in enumerate(ratings):
            reservation = await ReservationFactory.create_reservation(
                session, guest_id, property_id, date(2019, 1, index + 1)
            )
            review = PropertyReview(
                guest_id=guest_id,
                property_id=property_id,
                reservation_id=reservation.id,
                rating=rating,
                message="messages",
            )
            session.add(review)
            reviews.append(review)
        await session.commit()
        return reviews


# Common test fixtures
@pytest.fixture
async def test_owner(db_session: AsyncSession) -> User:
    """Create a property owner."""
    return await UserFactory.create_user(
        db_session,
        name="Eva Stanley",
        email="sebastianguerra@ymail.com"
    )


@pytest.fixture
async def test_guest(db_session: AsyncSession) -> User:
    """Create a guest."""
    return await UserFactory.create_user(
        db_session,
        name="Dominic Parks",
        email="victoriablackwell@outlook.com"
    )
