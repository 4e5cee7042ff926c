"""Concurrent read-modify-write of the JSON list columns."""

from asyncio import gather
from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from pathlib import Path
from uuid import UUID

from pytest import fixture
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from bloglist.models import BlogDB, UserDB
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.schemas.blog import BlogCreate
from bloglist.services import BlogService

UnitOfWork = Callable[[], AbstractAsyncContextManager[AsyncSession]]


@fixture
async def unit_of_work(tmp_path: Path) -> AsyncGenerator[UnitOfWork]:
    """
    Transactions on a file-backed database.

    Unlike the shared in-memory connection, every transaction here gets its
    own connection, so two of them really do run side by side.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'bloglist.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    @asynccontextmanager
    async def _begin() -> AsyncGenerator[AsyncSession]:
        async with maker() as session, session.begin():
            yield session

    yield _begin
    await engine.dispose()


@fixture
async def owner(unit_of_work: UnitOfWork) -> UserDB:
    async with unit_of_work() as session:
        return await UserRepository(session).create(username="mluukkai", password_hash="x")


@fixture
async def blog(unit_of_work: UnitOfWork, owner: UserDB) -> BlogDB:
    async with unit_of_work() as session:
        return await BlogRepository(session).create(owner.uuid, "React patterns", "https://reactpatterns.com/")


async def create_blog(unit_of_work: UnitOfWork, owner: UserDB, title: str) -> str:
    async with unit_of_work() as session:
        service = BlogService(BlogRepository(session), UserRepository(session))
        created = await service.create_blog(owner, BlogCreate(title=title, url=f"http://{title}/"))
        return str(created.id)


class TestConcurrentComments:
    async def test_no_comment_is_lost(
        self,
        unit_of_work: UnitOfWork,
        owner: UserDB,
        blog: BlogDB,
    ) -> None:
        async def comment(text: str) -> None:
            async with unit_of_work() as session:
                await BlogRepository(session).append_comment(blog.id, text, owner.uuid)

        await gather(comment("first"), comment("second"))

        async with unit_of_work() as session:
            stored = await BlogRepository(session).get_or_raise(blog.id)
        assert sorted(c["text"] for c in stored.comments) == ["first", "second"]


class TestConcurrentOwnership:
    async def test_parallel_creates_are_all_linked(
        self,
        unit_of_work: UnitOfWork,
        owner: UserDB,
    ) -> None:
        created = await gather(*(create_blog(unit_of_work, owner, f"blog{i}") for i in range(3)))

        async with unit_of_work() as session:
            fresh = await UserRepository(session).get_or_raise(owner.uuid)
        assert sorted(fresh.blog_ids) == sorted(created)

    async def test_parallel_unlinks_leave_nothing_behind(
        self,
        unit_of_work: UnitOfWork,
        owner: UserDB,
    ) -> None:
        first = await create_blog(unit_of_work, owner, "first")
        second = await create_blog(unit_of_work, owner, "second")

        async def unlink(blog_id: str) -> None:
            async with unit_of_work() as session:
                await UserRepository(session).remove_blog_id(owner.uuid, UUID(blog_id))

        await gather(unlink(first), unlink(second))

        async with unit_of_work() as session:
            fresh = await UserRepository(session).get_or_raise(owner.uuid)
        assert fresh.blog_ids == []
