"""Tests for the JWT token manager."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from jose import jwt
from pytest import mark, raises

from bloglist.configs import settings
from bloglist.errors import TokenExpiredError, TokenMissingOrInvalidError
from bloglist.managers.token_manager import (
    create_access_token,
    decode_access_token,
    extract_bearer_token,
)


def _sign(claims: dict, key: str | None = None) -> str:
    return jwt.encode(
        claims,
        key or settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
    )


def _claims(**overrides: object) -> dict:
    now = datetime.now(UTC)
    claims = {
        "sub": "mluukkai",
        "user_id": str(uuid4()),
        "jti": str(uuid4()),
        "iat": now,
        "exp": now + timedelta(minutes=5),
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": "access",
    }
    claims.update(overrides)
    return claims


class TestCreateAccessToken:
    """Test cases for create_access_token."""

    def test_token_contains_correct_claims(self) -> None:
        """Decoding a fresh token gives back the user it was issued for."""
        user_id = uuid4()

        token_data = decode_access_token(create_access_token(user_id=user_id, username="mluukkai"))

        assert token_data.username == "mluukkai"
        assert token_data.user_id == user_id
        assert token_data.token_type == "access"
        assert token_data.jti

    def test_default_expiry_is_long_lived(self) -> None:
        token_data = decode_access_token(create_access_token(user_id=uuid4(), username="x"))

        remaining = token_data.expires_at - datetime.now(UTC)
        assert remaining > timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES - 1)

    def test_tokens_are_unique(self) -> None:
        user_id = uuid4()

        first = create_access_token(user_id=user_id, username="x")
        second = create_access_token(user_id=user_id, username="x")

        assert first != second


class TestDecodeAccessToken:
    """Invalid and expired tokens fail with different errors."""

    def test_negative_expiry_is_expired(self) -> None:
        token = create_access_token(
            user_id=uuid4(),
            username="mluukkai",
            expires_delta=timedelta(seconds=-1),
        )

        with raises(TokenExpiredError) as exc_info:
            decode_access_token(token)

        assert exc_info.value.detail == "token expired"
        assert exc_info.value.status_code == 401

    @mark.parametrize("token", [None, "", "not-a-jwt", "a.b.c"])
    def test_missing_or_garbage_token(self, token: str | None) -> None:
        with raises(TokenMissingOrInvalidError) as exc_info:
            decode_access_token(token)

        assert exc_info.value.detail == "token missing or invalid"

    def test_wrong_signature(self) -> None:
        token = _sign(_claims(), key="some-other-secret")

        with raises(TokenMissingOrInvalidError):
            decode_access_token(token)

    def test_expired_but_forged_is_invalid_not_expired(self) -> None:
        """A bad signature wins over an expired claim."""
        token = _sign(
            _claims(exp=datetime.now(UTC) - timedelta(minutes=1)),
            key="some-other-secret",
        )

        with raises(TokenMissingOrInvalidError):
            decode_access_token(token)

    def test_tampered_payload(self) -> None:
        header, _payload, signature = create_access_token(user_id=uuid4(), username="a").split(".")
        _, other_payload, _ = create_access_token(user_id=uuid4(), username="b").split(".")

        with raises(TokenMissingOrInvalidError):
            decode_access_token(f"{header}.{other_payload}.{signature}")

    @mark.parametrize(
        "overrides",
        [
            {"type": "refresh"},
            {"aud": "someone-else"},
            {"iss": "someone-else"},
            {"user_id": "not-a-uuid"},
            {"sub": None},
            {"jti": None},
        ],
    )
    def test_bad_claims(self, overrides: dict) -> None:
        with raises(TokenMissingOrInvalidError):
            decode_access_token(_sign(_claims(**overrides)))


class TestExtractBearerToken:
    """Test cases for extract_bearer_token."""

    def test_bearer_scheme(self) -> None:
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    @mark.parametrize(
        "header",
        [None, "", "bearer abc", "BEARER abc", "Basic dXNlcjpwYXNz", "Bearer", "Bearer ", "Bearer   ", "abc"],
    )
    def test_other_shapes_yield_none(self, header: str | None) -> None:
        assert extract_bearer_token(header) is None
