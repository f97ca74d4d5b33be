"""Hotel ORMs: hotels and their rooms.

Invariants:
    - Room.capacity >= 0; a room with capacity 0 cannot be booked
"""

from sqlalchemy import CheckConstraint, Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booking_api.db.base import Base, TimestampMixin


class Hotel(TimestampMixin, Base):
    """Hotel entity: owns rooms."""
    __tablename__ = "hotels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[str] = mapped_column(String(500), nullable=False)

    rooms: Mapped[list["Room"]] = relationship(
        "Room", back_populates="hotel", lazy="selectin",
    )


class Room(TimestampMixin, Base):
    """Room entity: bookable unit with a capacity."""
    __tablename__ = "rooms"
    __table_args__ = (
        CheckConstraint("capacity >= 0", name="ck_rooms_capacity_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    hotel_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("hotels.id"), nullable=False,
    )

    hotel: Mapped["Hotel"] = relationship("Hotel", back_populates="rooms")
