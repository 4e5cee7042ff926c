from collections.abc import Awaitable, Callable
from logging import Logger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from bloglist.utils.helpers import host


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def error_body(exc: BaseAppError) -> dict[str, object]:
    """Render an application error as the public `{"error": ...}` body."""
    content: dict[str, object] = {"error": exc.detail}
    content.update(
        {k: v for k, v in exc.__dict__.items() if k not in ("status_code", "detail")},
    )
    return content


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        if not isinstance(exc, BaseAppError):
            exc = BaseAppError(str(exc) or "Internal Server Error")

        logger.warning(
            f"{exc.detail} for ip: {host(request)} for endpoint {request.url.path}",
        )

        return ORJSONResponse(content=error_body(exc), status_code=exc.status_code)

    return handler
