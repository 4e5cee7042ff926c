"""Generic async repository shared by the user and blog repositories."""

from collections.abc import Iterable
from typing import Any
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
)


class BaseRepository[ModelT: SQLModel]:
    """
    Lookup, listing and persistence helpers for one SQLModel table.

    Subclasses set `model` and, when the primary key is not called `id`,
    `id_field`. Writes are flushed but never committed; the session's owner
    (the request-scoped transaction) decides when they become durable.
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @property
    def _pk(self) -> Any:
        return getattr(self.model, self.id_field)

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """Return the row with this primary key, or None."""
        result = await self.session.execute(select(self.model).where(self._pk == record_id))
        return result.scalar_one_or_none()

    async def get_or_raise(self, record_id: UUID) -> ModelT:
        """
        Like `get_by_id`, but a missing row is an error.

        Raises:
            RecordNotFoundError: No row has this primary key
        """
        found = await self.get_by_id(record_id)
        if found is None:
            raise RecordNotFoundError
        return found

    async def get_many(self, record_ids: Iterable[UUID]) -> dict[UUID, ModelT]:
        """
        Load several rows with a single IN query.

        Args:
            record_ids: Primary keys to load; duplicates are ignored.

        Returns:
            dict[UUID, ModelT]: Rows keyed by primary key. Unknown keys are
            simply absent.
        """
        wanted = set(record_ids)
        if not wanted:
            return {}
        result = await self.session.execute(select(self.model).where(self._pk.in_(wanted)))
        return {getattr(row, self.id_field): row for row in result.scalars().all()}

    async def get_all(self) -> list[ModelT]:
        """Every row of the table, in storage order."""
        result = await self.session.execute(select(self.model))
        return list(result.scalars().all())

    async def delete(self, record_id: UUID) -> bool:
        """Delete by primary key; False when there was nothing to delete."""
        found = await self.get_by_id(record_id)
        if found is None:
            return False
        await self.session.delete(found)
        await self.session.flush()
        return True

    async def exists(self, record_id: UUID) -> bool:
        result = await self.session.execute(select(1).where(self._pk == record_id).limit(1))
        return result.scalar_one_or_none() is not None

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar() or 0

    async def _get_for_update(self, record_id: UUID, column: str) -> ModelT | None:
        """
        Load a row for a read-modify-write, holding its write lock.

        A no-op ``UPDATE ... SET column = column`` takes the lock because
        SQLite has no ``SELECT ... FOR UPDATE``. A concurrent writer of the
        same row then waits for this transaction to end, and the row is
        re-read afterwards so the values modified are the committed ones.

        Args:
            record_id: Primary key of the row
            column: Any non-key column of the model

        Returns:
            ModelT | None: Locked, freshly loaded row, or None if it is gone
        """
        target = getattr(self.model, column)
        touched = await self.session.execute(
            update(self.model)
            .where(self._pk == record_id)
            .values({column: target})
            .execution_options(synchronize_session=False),
        )
        if not touched.rowcount:
            return None

        result = await self.session.execute(
            select(self.model)
            .where(self._pk == record_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Stage a new or changed row, flush it and reload server defaults.

        Raises:
            DuplicateEntryError: A unique constraint rejected the row
            DatabaseError: Any other integrity violation
            DatabaseConnectionError: The flush itself failed
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            reason = str(e.orig or e)
            if any(word in reason.lower() for word in ("unique", "duplicate")):
                raise DuplicateEntryError(detail=reason) from e
            raise DatabaseError(detail=f"Integrity violation: {reason}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Could not write {self.model.__name__}: {e}") from e
        return record
