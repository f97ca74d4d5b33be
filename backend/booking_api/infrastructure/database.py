"""Database Access: engine, per-request sessions and the readiness query.

Invariants:
    - A session that raises rolls back before the error leaves get_db
    - SQLAlchemy failures leave as DatabaseError; BookingApiErrors pass through unchanged
    - Repositories own their commits; the session scope only cleans up

Design Decisions:
    - One module-level manager, created in the FastAPI lifespan and swapped in tests
    - SQLite URLs skip pool sizing (aiosqlite uses a static pool)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from booking_api.core.errors import DatabaseError
from booking_api.models.hotel import Room

logger = logging.getLogger(__name__)


class BookingDatabase:
    """Async engine plus session factory for the booking tables."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(pool_size=pool_size, max_overflow=max_overflow)
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Request-scoped session; rolls back whatever the request left open."""
        async with self._session_factory() as session:
            try:
                yield session
            except OperationalError as e:
                await session.rollback()
                logger.error("Database unreachable", extra={"error_code": "DATABASE_ERROR"})
                raise DatabaseError("Database unreachable", "connect") from e
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Booking query failed: {e}")
                raise DatabaseError("Booking query failed", "query") from e
            except Exception:
                await session.rollback()
                raise

    async def count_rooms(self) -> int:
        """Number of bookable rooms. Raises DatabaseError when the DB is down."""
        async with self.session() as db:
            return await db.scalar(select(func.count()).select_from(Room))

    async def close(self) -> None:
        await self.engine.dispose()


db_manager: BookingDatabase | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = BookingDatabase(database_url, **kwargs)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
