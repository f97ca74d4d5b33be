"""Token Verification: decodes bearer JWTs issued by the auth service.

Invariants:
    - Only verification lives here; token issuance happens elsewhere
    - Any decode failure or missing/non-integer userId claim raises AuthenticationError
"""

import jwt

from booking_api.core.domain_types import UserId
from booking_api.core.errors import AuthenticationError


def decode_user_id(token: str, secret: str, algorithm: str = "HS256") -> UserId:
    """Return the userId claim of a valid token."""
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token")

    user_id = payload.get("userId")
    # bool is an int subclass; reject it explicitly
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise AuthenticationError("Token has no user")
    return UserId(user_id)
