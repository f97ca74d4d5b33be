"""Session ORM: server-side record of an issued bearer token.

Invariants:
    - A token is only accepted while a row holds it (api/dependencies.py)
    - token is unique
"""

from sqlalchemy import Integer, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from booking_api.db.base import Base, TimestampMixin


class Session(TimestampMixin, Base):
    """Auth session: links a token to its user."""
    __tablename__ = "sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False,
    )
    token: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
