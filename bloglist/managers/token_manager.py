"""Token manager for issuing, extracting and decoding JWT access tokens."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from jose import ExpiredSignatureError, JWTError, jwt

from bloglist.configs import settings
from bloglist.errors.auth import TokenExpiredError, TokenMissingOrInvalidError
from bloglist.schemas.auth import TokenData

BEARER_PREFIX = "Bearer "
ACCESS_TOKEN_TYPE = "access"


def create_access_token(
    user_id: UUID,
    username: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a new signed access token.

    Args:
        user_id: User's UUID
        username: User's username
        expires_delta: Optional lifetime; defaults to ACCESS_TOKEN_EXPIRE_MINUTES.
            A zero or negative delta yields an already-expired token.

    Returns:
        str: Encoded JWT access token
    """
    now = datetime.now(UTC)
    if expires_delta is not None:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": username,
        "user_id": str(user_id),
        "jti": str(uuid4()),
        "iat": now,
        "exp": expire,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": ACCESS_TOKEN_TYPE,
    }

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
    )


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header value.

    Only the exact, case-sensitive ``"Bearer "`` prefix is recognised. This
    step never fails: anything else yields None and the decision is left to
    the identity resolver.

    Args:
        authorization: Raw header value, possibly None

    Returns:
        str | None: The token, or None when the header has another shape
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


def decode_access_token(token: str | None) -> TokenData:
    """
    Verify and decode an access token.

    The signature is checked before expiry, so a token that reports as
    expired was at least issued by this service.

    Args:
        token: JWT token string, or None when none was sent

    Returns:
        TokenData: Decoded token claims

    Raises:
        TokenExpiredError: If the token is genuine but past its expiry
        TokenMissingOrInvalidError: For a missing, malformed or forged token
    """
    if not token:
        raise TokenMissingOrInvalidError

    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except ExpiredSignatureError as e:
        raise TokenExpiredError from e
    except JWTError as e:
        raise TokenMissingOrInvalidError from e

    username: str | None = payload.get("sub")
    user_id: str | None = payload.get("user_id")
    jti: str | None = payload.get("jti")
    token_type: str | None = payload.get("type")

    if not username or not user_id or not jti or token_type != ACCESS_TOKEN_TYPE:
        raise TokenMissingOrInvalidError

    try:
        parsed_user_id = UUID(user_id)
    except ValueError as e:
        raise TokenMissingOrInvalidError from e

    return TokenData(
        username=username,
        user_id=parsed_user_id,
        jti=jti,
        token_type=token_type,
        expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
    )
