"""User repository for database operations."""

from logging import getLogger
from typing import cast
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from bloglist.configs import file_logger
from bloglist.errors.database import DatabaseError, DuplicateEntryError
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository

logger = file_logger(getLogger(__name__))


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Besides plain CRUD it owns the two writes that keep a user's `blog_ids`
    in step with the blogs table.
    """

    model = UserDB
    id_field = "uuid"

    async def create(self, username: str, password_hash: str, name: str | None = None) -> UserDB:
        """
        Create a new user in the database.

        Args:
            username: Unique username
            password_hash: Already-hashed password
            name: Optional display name

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If username already exists
            DatabaseError: For other database errors
        """
        db_user = UserDB(username=username, name=name, password_hash=password_hash)
        try:
            return await self._add_and_refresh(db_user)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(detail=f"Username '{username}' already exists") from e

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by exact (case-sensitive) username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.username == username)),
        )
        return result.scalar_one_or_none()

    async def username_exists(self, username: str) -> bool:
        result = await self.session.execute(
            select(1).where(cast(ColumnElement[bool], UserDB.username == username)).limit(1),
        )
        return result.scalar_one_or_none() is not None

    async def add_blog_id(self, user_id: UUID, blog_id: UUID) -> UserDB:
        """
        Record `blog_id` in the owner's blog list.

        Args:
            user_id: Owner UUID
            blog_id: Newly created blog UUID

        Returns:
            UserDB: Updated owner

        Raises:
            DatabaseError: If the owner row is gone or the write fails
        """
        db_user = await self._get_for_update(user_id, "blog_ids")
        if not db_user:
            msg = f"Owner {user_id} vanished before blog {blog_id} could be linked"
            logger.error(msg)
            raise DatabaseError(detail=msg)

        key = str(blog_id)
        if key not in db_user.blog_ids:
            db_user.blog_ids = [*db_user.blog_ids, key]
        return await self._add_and_refresh(db_user)

    async def remove_blog_id(self, user_id: UUID, blog_id: UUID) -> UserDB | None:
        """
        Drop `blog_id` from the owner's blog list.

        Args:
            user_id: Owner UUID
            blog_id: Deleted blog UUID

        Returns:
            UserDB | None: Updated owner, or None if the owner no longer exists
        """
        db_user = await self._get_for_update(user_id, "blog_ids")
        if not db_user:
            logger.warning(f"Owner {user_id} of deleted blog {blog_id} not found")
            return None

        key = str(blog_id)
        db_user.blog_ids = [bid for bid in db_user.blog_ids if bid != key]
        return await self._add_and_refresh(db_user)
