"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, RoomId, BookingId wrap ints - never use bare int in service signatures
    - TicketStatus values match the `tickets.status` column

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
RoomId = NewType("RoomId", int)
BookingId = NewType("BookingId", int)


# ─── Enums ───────────────────────────────────────────────────────

class TicketStatus(str, Enum):
    """Ticket payment states."""
    RESERVED = "RESERVED"
    PAID = "PAID"
