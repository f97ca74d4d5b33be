"""Ticket ORMs: purchase record and its category attributes.

Invariants:
    - status is one of TicketStatus (RESERVED, PAID)
    - ticket_type loaded eagerly: eligibility reads is_remote/includes_hotel
"""

from sqlalchemy import Boolean, Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booking_api.core.domain_types import TicketStatus
from booking_api.db.base import Base, TimestampMixin


class TicketType(TimestampMixin, Base):
    """Ticket category: remote/in-person and hotel inclusion flags."""
    __tablename__ = "ticket_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    is_remote: Mapped[bool] = mapped_column(Boolean, nullable=False)
    includes_hotel: Mapped[bool] = mapped_column(Boolean, nullable=False)


class Ticket(TimestampMixin, Base):
    """Ticket entity: belongs to an enrollment."""
    __tablename__ = "tickets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ticket_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("ticket_types.id"), nullable=False,
    )
    enrollment_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("enrollments.id"), nullable=False,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TicketStatus.RESERVED.value,
    )

    ticket_type: Mapped["TicketType"] = relationship("TicketType", lazy="selectin")
    enrollment: Mapped["Enrollment"] = relationship(
        "Enrollment", back_populates="tickets",
    )
