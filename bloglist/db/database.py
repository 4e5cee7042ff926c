"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from bloglist.configs import file_logger, settings
from bloglist.decorators.with_retry import with_retry
from bloglist.errors.base import BaseAppError
from bloglist.errors.database import DatabaseConnectionError, DatabaseInitializationError

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkout")
    def on_checkout(
        dbapi_connection: object,
        connection_record: object,
        connection_proxy: object,
    ) -> None:
        logger.debug("Connection checked out from pool")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


def _engine_kwargs(database_url: str) -> dict[str, Any]:
    """
    Build engine keyword arguments for the configured backend.

    SQLite gets a single shared connection when it is in-memory (every new
    connection would otherwise see an empty database); PostgreSQL gets the
    pool sizing and statement timeouts from settings.
    """
    url = make_url(database_url)
    kwargs: dict[str, Any] = {"echo": settings.DATABASE_ECHO}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return kwargs

    kwargs.update(
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_recycle=settings.POOL_RECYCLE,
        pool_pre_ping=True,
    )
    if url.get_driver_name() == "asyncpg":
        kwargs["connect_args"] = {
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        }
    return kwargs


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    **_engine_kwargs(settings.DATABASE_URL),
)

if settings.DEBUG:
    _configure_engine_events(engine)

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    One session (and one transaction) per request: everything a route does
    commits together when the handler returns, or rolls back if it raises.

    Yields:
        AsyncSession: Database session
    """
    async with transaction() as session:
        yield session


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction() as session:
            blogs = await BlogRepository(session).get_all()
            # Commits on successful exit, rolls back on exception
        ```
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except BaseAppError:
            # Reported by the exception handlers
            await session.rollback()
            raise
        except SQLAlchemyError as e:
            await session.rollback()
            logger.exception("Transaction error")
            raise DatabaseConnectionError(detail="Failed to save changes") from e
        except Exception:
            await session.rollback()
            logger.exception("Transaction error")
            raise
        finally:
            await session.close()


@with_retry(max_retries=5, base_delay=0.5, max_delay=5.0, exec_retry=DatabaseInitializationError)
async def init_db() -> None:
    """
    Initialize database tables.

    Creates every table registered on the SQLModel metadata. Called from the
    application lifespan at startup; retried while the database server is
    still coming up.
    """
    # Import all models to ensure they are registered
    from bloglist.models import BlogDB, UserDB  # noqa: F401, PLC0415

    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
    except SQLAlchemyError as e:
        logger.exception("Database initialization failed")
        raise DatabaseInitializationError from e
    logger.info("Database initialized successfully!")


async def drop_db() -> None:
    """Drop every table (used by the test suite between cases)."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)


async def ping_db() -> bool:
    """
    Check that the database answers a trivial query.

    Returns:
        bool: True if reachable, False otherwise.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database ping failed")
        return False
    return True


async def close_db() -> None:
    """
    Close database connections.

    Called from the application lifespan at shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")
