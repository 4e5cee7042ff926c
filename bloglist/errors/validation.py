"""Validation errors and request-body validation handling."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from bloglist.configs import file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.utils.helpers import host

logger = file_logger(getLogger(__name__))


class ValidationError(BaseAppError):
    """Raised when required input is missing or breaks a field rule."""

    def __init__(self, detail: str = "Validation Error", field: str | None = None) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)
        self.field = field


class MalformedIdError(BaseAppError):
    """Raised when a path identifier is not a well-formed UUID."""

    def __init__(self, detail: str = "malformatted id") -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


validation_error_handler = create_exception_handler(logger)


async def request_validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle FastAPI body/query parsing errors with the application error shape.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with a summary message and the per-field errors.
    """
    exec_error = cast(RequestValidationError, exc)

    formatted_errors = []
    for error in exec_error.errors():
        formatted_errors.append(
            {
                "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),  # Skip 'body'
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "validation_error"),
            },
        )

    summary = "; ".join(f"{e['field'] or 'body'}: {e['message']}" for e in formatted_errors)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {summary}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "error": summary or "Validation failed",
            "errors": formatted_errors,
        },
    )
