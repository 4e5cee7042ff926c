"""Blog repository for database operations."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import asc, select

from bloglist.models.blog import BlogDB
from bloglist.repositories.base import BaseRepository


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    This class implements the repository pattern for Blog entities. It knows
    nothing about owners' blog lists; keeping those in step is the blog
    service's job.
    """

    model = BlogDB

    async def create(
        self,
        owner_id: UUID,
        title: str,
        url: str,
        author: str | None = None,
        likes: int = 0,
    ) -> BlogDB:
        """
        Create a new blog in the database.

        Args:
            owner_id: UUID of the owning user
            title: Blog title
            url: Blog URL
            author: Optional author name
            likes: Initial like count

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            owner_id=owner_id,
            title=title,
            url=url,
            author=author,
            likes=likes,
            comments=[],
        )
        return await self._add_and_refresh(db_blog)

    async def get_all(self) -> list[BlogDB]:
        """
        Get all blogs, oldest first.

        Returns:
            list[BlogDB]: List of blogs
        """
        # pyrefly: ignore [bad-argument-type]
        result = await self.session.execute(select(BlogDB).order_by(asc(BlogDB.created_at)))
        return list(result.scalars().all())

    async def update(self, blog_id: UUID, changes: dict[str, Any]) -> BlogDB | None:
        """
        Overwrite the supplied fields of a blog.

        Args:
            blog_id: Blog UUID
            changes: Field values to write (already filtered to writable fields)

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        db_blog = await self.get_by_id(blog_id)
        if not db_blog:
            return None

        for key, value in changes.items():
            setattr(db_blog, key, value)
        db_blog.updated_at = datetime.now(tz=UTC)

        return await self._add_and_refresh(db_blog)

    async def append_comment(self, blog_id: UUID, text: str, user_id: UUID) -> BlogDB | None:
        """
        Append a comment to the end of a blog's comment list.

        Args:
            blog_id: Blog UUID
            text: Comment text
            user_id: Commenting user's UUID

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        db_blog = await self._get_for_update(blog_id, "comments")
        if not db_blog:
            return None

        db_blog.comments = [*db_blog.comments, {"text": text, "user": str(user_id)}]
        return await self._add_and_refresh(db_blog)
