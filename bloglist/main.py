"""Bloglist Backend - users, blogs and comments over FastAPI and SQLModel."""

from logging import getLogger

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse

from bloglist.configs import file_logger, settings
from bloglist.db import ping_db
from bloglist.errors import (
    BaseAppError,
    DatabaseError,
    ForbiddenError,
    MalformedIdError,
    PasswordHashingError,
    UserAuthenticationError,
    ValidationError,
    auth_exception_handler,
    create_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    request_validation_exception_handler,
    validation_error_handler,
)
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.routes import auth_router, blogs_router, users_router
from bloglist.schemas import HealthCheckResponse
from bloglist.utils.helpers import today_str

logger = file_logger(getLogger(__name__))

app = FastAPI(
    title=settings.APP_NAME,
    description="Bloglist Backend API",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.DEBUG,
    swagger_ui_parameters={"docExpansion": "none", "operationsSorter": "method"},
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

routes = [users_router, blogs_router, auth_router]

_ = [app.include_router(router) for router in routes]

errors = [
    (ValidationError, validation_error_handler),
    (MalformedIdError, validation_error_handler),
    (UserAuthenticationError, auth_exception_handler),
    (ForbiddenError, auth_exception_handler),
    (DatabaseError, database_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (BaseAppError, create_exception_handler(logger)),
    (RequestValidationError, request_validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 12:00:00",
                        "database": "connected",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check() -> HealthCheckResponse:
    """
    Health check with database reachability.

    Always answers 200; `status` is "degraded" when the database does not
    respond.
    """
    db_ok = await ping_db()
    return HealthCheckResponse(
        version=app.version,
        status="ok" if db_ok else "degraded",
        timestamp=today_str(),
        database="connected" if db_ok else "unreachable",
    )
