"""
Blog service.

Owns the blog aggregate: every write that touches a blog and the matching
back-reference on its owner goes through here, and reads resolve owners and
comment authors by a second lookup rather than a join.
"""

from collections.abc import Iterable
from uuid import UUID

from bloglist.errors.auth import ForbiddenError
from bloglist.errors.database import RecordNotFoundError
from bloglist.errors.validation import MalformedIdError, ValidationError
from bloglist.models import BlogDB, UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.schemas.blog import (
    BlogCreate,
    BlogResponse,
    BlogUpdate,
    CommentAuthor,
    CommentResponse,
    OwnerResponse,
)
from bloglist.utils.helpers import try_parse_uuid

logger = get_logger(__name__)

UPDATABLE_FIELDS = frozenset({"title", "author", "url", "likes"})


def parse_id(raw_id: str) -> UUID:
    """
    Parse a path identifier.

    Raises:
        MalformedIdError: If `raw_id` is not a UUID
    """
    blog_id = try_parse_uuid(raw_id)
    if blog_id is None:
        raise MalformedIdError
    return blog_id


def validate_blog_create(payload: BlogCreate) -> tuple[str, str]:
    """
    Check the required fields of a new blog.

    Returns:
        tuple[str, str]: The title and url

    Raises:
        ValidationError: naming the missing field
    """
    if not payload.title:
        raise ValidationError("title is required", field="title")
    if not payload.url:
        raise ValidationError("url is required", field="url")
    return payload.title, payload.url


def _referenced_user_ids(blogs: Iterable[BlogDB]) -> set[UUID]:
    ids: set[UUID] = set()
    for blog in blogs:
        ids.add(blog.owner_id)
        for comment in blog.comments:
            user_id = try_parse_uuid(comment.get("user"))
            if user_id is not None:
                ids.add(user_id)
    return ids


def populate_blog(blog: BlogDB, users: dict[UUID, UserDB]) -> BlogResponse:
    """
    Merge owner and comment authors onto a blog.

    Args:
        blog: Stored blog
        users: Users keyed by UUID; missing ones resolve to None

    Returns:
        BlogResponse: Populated blog
    """
    owner = users.get(blog.owner_id)
    comments = []
    for comment in blog.comments:
        author_id = try_parse_uuid(comment.get("user"))
        author = users.get(author_id) if author_id else None
        comments.append(
            CommentResponse(
                text=comment.get("text", ""),
                user=CommentAuthor(username=author.username, name=author.name) if author else None,
            ),
        )

    return BlogResponse(
        id=blog.id,
        title=blog.title,
        author=blog.author,
        url=blog.url,
        likes=blog.likes,
        user=OwnerResponse(id=owner.uuid, username=owner.username, name=owner.name)
        if owner
        else None,
        comments=comments,
    )


class BlogService:
    """Service for blog operations and the owner back-reference."""

    def __init__(self, blog_repo: BlogRepository, user_repo: UserRepository) -> None:
        """
        Initialize the blog service.

        Args:
            blog_repo: Blog repository
            user_repo: User repository, used for owners and comment authors
        """
        self.blog_repo = blog_repo
        self.user_repo = user_repo

    async def _populate_many(self, blogs: list[BlogDB]) -> list[BlogResponse]:
        users = await self.user_repo.get_many(_referenced_user_ids(blogs))
        return [populate_blog(blog, users) for blog in blogs]

    async def _populate(self, blog: BlogDB) -> BlogResponse:
        return (await self._populate_many([blog]))[0]

    async def _get_blog_or_raise(self, raw_id: str) -> BlogDB:
        blog_id = parse_id(raw_id)
        return await self.blog_repo.get_or_raise(blog_id)

    async def list_blogs(self) -> list[BlogResponse]:
        """List every blog, oldest first, fully populated."""
        return await self._populate_many(await self.blog_repo.get_all())

    async def get_blog(self, raw_id: str) -> BlogResponse:
        """
        Get a single populated blog.

        Raises:
            MalformedIdError: If the id is not a UUID
            RecordNotFoundError: If no such blog exists
        """
        return await self._populate(await self._get_blog_or_raise(raw_id))

    async def create_blog(self, user: UserDB, payload: BlogCreate) -> BlogResponse:
        """
        Create a blog owned by `user` and link it on the owner.

        The blog insert and the owner update are two flushes inside the
        caller's transaction. If linking fails the error propagates and the
        transaction is rolled back, so neither write is committed.

        Args:
            user: Authenticated owner
            payload: Blog body

        Returns:
            BlogResponse: The new blog, populated

        Raises:
            ValidationError: If title or url is missing
            DatabaseError: If the owner could not be updated
        """
        title, url = validate_blog_create(payload)

        blog = await self.blog_repo.create(
            owner_id=user.uuid,
            title=title,
            url=url,
            author=payload.author,
            likes=payload.likes if payload.likes is not None else 0,
        )
        await self.user_repo.add_blog_id(user.uuid, blog.id)

        logger.info("Blog created", blog_id=str(blog.id))
        return await self._populate(blog)

    async def delete_blog(self, user: UserDB, raw_id: str) -> None:
        """
        Delete a blog owned by `user` and unlink it from the owner.

        Raises:
            MalformedIdError: If the id is not a UUID
            RecordNotFoundError: If no such blog exists
            ForbiddenError: If `user` is not the owner
        """
        blog = await self._get_blog_or_raise(raw_id)
        if blog.owner_id != user.uuid:
            raise ForbiddenError

        await self.blog_repo.delete(blog.id)
        await self.user_repo.remove_blog_id(blog.owner_id, blog.id)
        logger.info("Blog deleted", blog_id=str(blog.id))

    async def update_blog(self, raw_id: str, payload: BlogUpdate) -> BlogResponse:
        """
        Overwrite the supplied fields of a blog.

        No ownership check: this is the like button and anyone may press it.
        Likes are written as an absolute value.

        Raises:
            MalformedIdError: If the id is not a UUID
            RecordNotFoundError: If no such blog exists
        """
        blog_id = parse_id(raw_id)
        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if key in UPDATABLE_FIELDS
        }
        # title and url stay required once set
        for required in ("title", "url"):
            if required in changes and not changes[required]:
                raise ValidationError(f"{required} is required", field=required)
        if changes.get("likes", 0) is None:
            changes.pop("likes")

        blog = await self.blog_repo.update(blog_id, changes)
        if blog is None:
            raise RecordNotFoundError
        return await self._populate(blog)

    async def add_comment(self, user: UserDB, raw_id: str, text: str | None) -> BlogResponse:
        """
        Append a comment by `user` to a blog.

        Empty text is accepted; only a missing `text` is rejected.

        Raises:
            MalformedIdError: If the id is not a UUID
            ValidationError: If `text` is missing
            RecordNotFoundError: If no such blog exists
        """
        blog_id = parse_id(raw_id)
        if text is None:
            raise ValidationError("comment text is required", field="text")

        blog = await self.blog_repo.append_comment(blog_id, text, user.uuid)
        if blog is None:
            raise RecordNotFoundError
        return await self._populate(blog)
