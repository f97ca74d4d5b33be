"""User ORM: the authenticated principal that owns a booking."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from booking_api.db.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """User entity: identified by integer id."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
