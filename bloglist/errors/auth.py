"""Authentication and authorization errors."""

from logging import getLogger

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_401_UNAUTHORIZED

from bloglist.configs import file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when the username/password pair does not match a user."""

    def __init__(self) -> None:
        super().__init__("invalid username or password", HTTP_401_UNAUTHORIZED)


class TokenMissingOrInvalidError(UserAuthenticationError):
    """Raised when no bearer token was sent or it fails verification."""

    def __init__(self) -> None:
        super().__init__("token missing or invalid", HTTP_401_UNAUTHORIZED)


class TokenExpiredError(UserAuthenticationError):
    """Raised when a correctly signed token is past its expiry instant."""

    def __init__(self) -> None:
        super().__init__("token expired", HTTP_401_UNAUTHORIZED)


class ForbiddenError(BaseAppError):
    """Raised when an authenticated user mutates a resource owned by someone else."""

    def __init__(self, detail: str = "target blog belongs to another user") -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


auth_exception_handler = create_exception_handler(logger)
