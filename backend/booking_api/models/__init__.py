"""ORM Models: SQLAlchemy declarative models for all booking entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the owner of Session, Enrollment and Booking rows

Design Decisions:
    - One file per aggregate for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from booking_api.models.user import User  # noqa: F401
from booking_api.models.session import Session  # noqa: F401
from booking_api.models.enrollment import Enrollment  # noqa: F401
from booking_api.models.ticket import Ticket, TicketType  # noqa: F401
from booking_api.models.hotel import Hotel, Room  # noqa: F401
from booking_api.models.booking import Booking  # noqa: F401
