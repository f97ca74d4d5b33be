"""SQLAlchemy Repositories: shell implementations of core/repository_protocols.py.

Invariants:
    - One AsyncSession per repository instance (the request session from get_db)
    - Writes commit immediately: each booking operation is a single persistence call
    - Reads return ORM objects with relationships already loaded (selectin)
    - Constraint violations on booking writes surface as DatabaseError carrying
      the user/room/booking ids of the failed write
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from booking_api.core.domain_types import BookingId, RoomId, UserId
from booking_api.core.errors import DatabaseError, ErrorContext
from booking_api.models.booking import Booking
from booking_api.models.enrollment import Enrollment
from booking_api.models.hotel import Room

logger = logging.getLogger(__name__)


class SqlEnrollmentRepository:
    """Enrollment lookups."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_with_tickets(self, user_id: UserId) -> Enrollment | None:
        result = await self.db.execute(
            select(Enrollment).where(Enrollment.user_id == user_id),
        )
        return result.scalar_one_or_none()


class SqlRoomRepository:
    """Room lookups."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, room_id: RoomId) -> Room | None:
        return await self.db.get(Room, room_id)


class SqlBookingRepository:
    """Booking persistence."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user_id: UserId, room_id: RoomId) -> Booking:
        # TODO: capacity is checked before this insert without locking the room
        # row, so concurrent requests can over-subscribe a room. Needs
        # SELECT ... FOR UPDATE on rooms (or a bookings-per-room count check)
        # inside one transaction.
        booking = Booking(user_id=user_id, room_id=room_id)
        self.db.add(booking)
        await self._commit(
            "insert", ErrorContext(user_id=user_id, room_id=room_id),
        )
        await self.db.refresh(booking)
        return booking

    async def find_by_user(self, user_id: UserId) -> Booking | None:
        result = await self.db.execute(
            select(Booking)
            .where(Booking.user_id == user_id)
            .order_by(Booking.id)
            .limit(1),
        )
        return result.scalar_one_or_none()

    async def update_room(self, booking_id: BookingId, room_id: RoomId) -> Booking:
        booking = await self.db.get(Booking, booking_id)
        if booking is None:
            # Caller verified ownership; a miss here means the row vanished mid-request
            raise LookupError(f"Booking {booking_id} disappeared before update")
        booking.room_id = room_id
        await self._commit(
            "update",
            ErrorContext(user_id=booking.user_id, booking_id=booking_id, room_id=room_id),
        )
        # room relationship still points at the old room until refreshed
        await self.db.refresh(booking, attribute_names=["room", "updated_at"])
        return booking

    async def _commit(self, operation: str, context: ErrorContext) -> None:
        """Commit a booking write; constraint violations become DatabaseError."""
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(
                f"Booking {operation} violated a constraint: {e.orig}",
                extra={
                    "error_code": "DATABASE_ERROR",
                    "user_id": context.user_id,
                    "booking_id": context.booking_id,
                    "room_id": context.room_id,
                },
            )
            raise DatabaseError(
                "Booking violates a database constraint", operation, context,
            ) from e
