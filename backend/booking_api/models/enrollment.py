"""Enrollment ORM: a user's event registration record.

Invariants:
    - One enrollment per user (user_id unique)
    - tickets loaded eagerly, ordered by id: the first ticket decides hotel eligibility
"""

from datetime import datetime

from sqlalchemy import Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booking_api.db.base import Base, TimestampMixin


class Enrollment(TimestampMixin, Base):
    """Enrollment entity: registration data plus purchased tickets."""
    __tablename__ = "enrollments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), unique=True, nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    cpf: Mapped[str] = mapped_column(String(20), nullable=False)
    birthday: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    phone: Mapped[str] = mapped_column(String(30), nullable=False)

    tickets: Mapped[list["Ticket"]] = relationship(
        "Ticket", back_populates="enrollment",
        order_by="Ticket.id", lazy="selectin",
    )
