"""Booking Schemas: request bodies and responses for /booking.

Invariants:
    - BookingRequest reads only the camelCase key "roomId"; room_id is optional
      because a missing room is a 404 decided by the service AFTER the
      enrollment/ticket checks, not a 400 here
    - Responses are built by field name and serialized by camelCase alias
    - BookingResponse omits user_id, room_id and the booking timestamps
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BookingRequest(BaseModel):
    """Body of POST /booking and PUT /booking/{bookingId}."""
    model_config = ConfigDict(alias_generator=to_camel)

    room_id: int | None = None


class _CamelResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class BookingIdResponse(_CamelResponse):
    booking_id: int


class RoomResponse(_CamelResponse):
    """Room as embedded in a booking."""
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime


class BookingResponse(_CamelResponse):
    """The user's booking with its room."""
    id: int
    room: RoomResponse = Field(alias="Room")
