from bloglist.errors.auth import (
    ForbiddenError,
    InvalidCredentialsError,
    TokenExpiredError,
    TokenMissingOrInvalidError,
    UserAuthenticationError,
    auth_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler, error_body
from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import (
    MalformedIdError,
    ValidationError,
    request_validation_exception_handler,
    validation_error_handler,
)

__all__ = [
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "MalformedIdError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "TokenExpiredError",
    "TokenMissingOrInvalidError",
    "UserAuthenticationError",
    "ValidationError",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "error_body",
    "password_hashing_exception_handler",
    "request_validation_exception_handler",
    "validation_error_handler",
]
