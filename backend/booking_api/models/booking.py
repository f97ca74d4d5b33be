"""Booking ORM: assignment of a user to a room.

Invariants:
    - At most one booking per user is expected; lookups take the oldest row
    - room loaded eagerly: GET /booking returns the room inline
"""

from sqlalchemy import Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booking_api.db.base import Base, TimestampMixin


class Booking(TimestampMixin, Base):
    """Booking entity: links a user to a room."""
    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    room_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("rooms.id"), nullable=False, index=True,
    )

    room: Mapped["Room"] = relationship("Room", lazy="selectin")
