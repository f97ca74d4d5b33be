"""Booking Routes: create, read and move the authenticated user's hotel booking.

Invariants:
    - Every route requires a valid bearer token (get_current_user_id)
    - Routes translate request/response only; failures surface as BookingApiError
      and are mapped to status codes by api/error_handlers.py
    - Success is always 200 (POST included)
"""

from fastapi import APIRouter, Depends

from booking_api.api.dependencies import get_booking_service, get_current_user_id
from booking_api.core.domain_types import BookingId, RoomId, UserId
from booking_api.schemas.booking import (
    BookingIdResponse,
    BookingRequest,
    BookingResponse,
)
from booking_api.services.booking_service import BookingService

router = APIRouter(prefix="/booking", tags=["booking"])


def _room_id(body: BookingRequest | None) -> RoomId | None:
    if body is None or body.room_id is None:
        return None
    return RoomId(body.room_id)


@router.post("", response_model=BookingIdResponse)
async def create_booking(
    body: BookingRequest | None = None,
    user_id: UserId = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Book a room for the current user."""
    booking_id = await service.create_booking(user_id, _room_id(body))
    return BookingIdResponse(booking_id=booking_id)


@router.get("", response_model=BookingResponse)
async def get_booking(
    user_id: UserId = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Return the current user's booking with its room."""
    booking = await service.get_booking(user_id)
    return BookingResponse.model_validate(booking)


@router.put("/{booking_id}", response_model=BookingIdResponse)
async def update_booking(
    booking_id: int,
    body: BookingRequest | None = None,
    user_id: UserId = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Move the current user's booking to another room."""
    updated = await service.update_booking(
        user_id, _room_id(body), BookingId(booking_id),
    )
    return BookingIdResponse(booking_id=updated)
