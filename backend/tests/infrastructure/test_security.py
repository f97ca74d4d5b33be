"""Token Verification: decode_user_id accepts only signed tokens with an integer userId."""

import jwt
import pytest

from booking_api.core.errors import AuthenticationError
from booking_api.infrastructure.security import decode_user_id

SECRET = "unit-test-secret"


def test_valid_token_yields_user_id():
    token = jwt.encode({"userId": 12}, SECRET, algorithm="HS256")
    assert decode_user_id(token, SECRET) == 12


def test_wrong_secret_is_rejected():
    token = jwt.encode({"userId": 12}, "other-secret", algorithm="HS256")
    with pytest.raises(AuthenticationError):
        decode_user_id(token, SECRET)


def test_garbage_token_is_rejected():
    with pytest.raises(AuthenticationError):
        decode_user_id("not-a-jwt", SECRET)


@pytest.mark.parametrize("payload", [{}, {"userId": "12"}, {"userId": True}])
def test_missing_or_non_integer_user_id_is_rejected(payload):
    token = jwt.encode(payload, SECRET, algorithm="HS256")
    with pytest.raises(AuthenticationError):
        decode_user_id(token, SECRET)
