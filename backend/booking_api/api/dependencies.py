"""Route Dependencies: authentication and service wiring for FastAPI routes.

Invariants:
    - get_current_user_id raises AuthenticationError (401) unless the bearer token
      decodes AND a sessions row holds that exact token
    - get_booking_service builds repositories on the request's DB session
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from booking_api.config import get_settings
from booking_api.core.domain_types import UserId
from booking_api.core.errors import AuthenticationError
from booking_api.infrastructure.database import get_db
from booking_api.infrastructure.repositories import (
    SqlBookingRepository,
    SqlEnrollmentRepository,
    SqlRoomRepository,
)
from booking_api.infrastructure.security import decode_user_id
from booking_api.models.session import Session as SessionModel
from booking_api.services.booking_service import BookingService

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> UserId:
    """Resolve the authenticated user from the Authorization header."""
    if credentials is None:
        raise AuthenticationError("Missing bearer token")

    settings = get_settings()
    user_id = decode_user_id(
        credentials.credentials, settings.jwt_secret, settings.jwt_algorithm,
    )

    result = await db.execute(
        select(SessionModel.id).where(SessionModel.token == credentials.credentials),
    )
    if result.scalar_one_or_none() is None:
        raise AuthenticationError("No session for token")
    return user_id


def get_booking_service(db: AsyncSession = Depends(get_db)) -> BookingService:
    return BookingService(
        enrollments=SqlEnrollmentRepository(db),
        rooms=SqlRoomRepository(db),
        bookings=SqlBookingRepository(db),
    )
