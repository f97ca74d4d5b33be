"""Service test fixtures: async DB, FastAPI test client, and row factories.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - factory inserts rows through the same engine the app uses

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
"""

from datetime import datetime, timezone
from uuid import uuid4

import jwt
import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from booking_api.config import get_settings
from booking_api.core.domain_types import TicketStatus
from booking_api.db.base import Base
from booking_api.infrastructure.database import get_db, BookingDatabase
from booking_api.models import (
    Booking, Enrollment, Hotel, Room, Session, Ticket, TicketType, User,
)
import booking_api.infrastructure.database as db_module
from booking_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = BookingDatabase.__new__(BookingDatabase)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


class Factory:
    """Inserts committed rows into the test DB."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _save(self, row):
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        return row

    async def user(self) -> User:
        return await self._save(
            User(email=f"{uuid4().hex}@example.com", password="hashed"),
        )

    async def token(self, user: User) -> str:
        """Signed token for the user, backed by a sessions row."""
        token = self.sign(user.id)
        await self._save(Session(user_id=user.id, token=token))
        return token

    @staticmethod
    def sign(user_id: int) -> str:
        settings = get_settings()
        return jwt.encode(
            {"userId": user_id, "jti": uuid4().hex},
            settings.jwt_secret, algorithm=settings.jwt_algorithm,
        )

    async def enrollment(self, user: User) -> Enrollment:
        return await self._save(Enrollment(
            user_id=user.id, name="Ada Lovelace", cpf="12345678909",
            birthday=datetime(1990, 1, 1, tzinfo=timezone.utc),
            phone="(21) 98999-9999",
        ))

    async def ticket_type(
        self, is_remote: bool = False, includes_hotel: bool = True,
    ) -> TicketType:
        return await self._save(TicketType(
            name="Presencial + Hotel", price=600,
            is_remote=is_remote, includes_hotel=includes_hotel,
        ))

    async def ticket(
        self, enrollment: Enrollment, ticket_type: TicketType,
        status: TicketStatus = TicketStatus.PAID,
    ) -> Ticket:
        return await self._save(Ticket(
            enrollment_id=enrollment.id, ticket_type_id=ticket_type.id,
            status=status.value,
        ))

    async def hotel(self) -> Hotel:
        return await self._save(
            Hotel(name="Driven Resort", image="https://example.com/hotel.png"),
        )

    async def room(self, hotel: Hotel, capacity: int = 3) -> Room:
        return await self._save(
            Room(name=f"Room {uuid4().hex[:4]}", capacity=capacity, hotel_id=hotel.id),
        )

    async def booking(self, user: User, room: Room) -> Booking:
        return await self._save(Booking(user_id=user.id, room_id=room.id))

    async def eligible_user(self) -> tuple[User, str]:
        """User with a session token and a paid, in-person, hotel ticket."""
        user = await self.user()
        token = await self.token(user)
        enrollment = await self.enrollment(user)
        await self.ticket(enrollment, await self.ticket_type())
        return user, token


@pytest.fixture
def factory(test_db) -> Factory:
    return Factory(test_db)
