"""Tests for the blog statistics."""

from types import SimpleNamespace
from uuid import uuid4

from pytest import fixture

from bloglist.data import favorite_blog, most_blogs, most_likes, total_likes
from bloglist.models import BlogDB
from bloglist.schemas.statistics import AuthorBlogCount, AuthorLikes, FavoriteBlog


def blog(title: str, author: str | None, likes: int) -> BlogDB:
    return BlogDB(owner_id=uuid4(), title=title, author=author, url=f"http://{title}", likes=likes)


@fixture
def blogs() -> list[BlogDB]:
    return [
        blog("React patterns", "Michael Chan", 7),
        blog("Go To Statement Considered Harmful", "Edsger W. Dijkstra", 5),
        blog("Canonical string reduction", "Edsger W. Dijkstra", 12),
        blog("First class tests", "Robert C. Martin", 10),
        blog("TDD harms architecture", "Robert C. Martin", 0),
        blog("Type wars", "Robert C. Martin", 2),
    ]


class TestTotalLikes:
    def test_empty(self) -> None:
        assert total_likes([]) == 0

    def test_single(self) -> None:
        assert total_likes([blog("Go To", "Edsger W. Dijkstra", 5)]) == 5

    def test_plain_objects(self) -> None:
        items = [SimpleNamespace(title="", author=None, likes=n) for n in (5, 7, 24)]

        assert total_likes(items) == 36

    def test_many(self, blogs: list[BlogDB]) -> None:
        assert total_likes(blogs) == 36


class TestFavoriteBlog:
    def test_empty(self) -> None:
        assert favorite_blog([]) is None

    def test_many(self, blogs: list[BlogDB]) -> None:
        assert favorite_blog(blogs) == FavoriteBlog(
            title="Canonical string reduction",
            author="Edsger W. Dijkstra",
            likes=12,
        )

    def test_first_maximum_wins(self) -> None:
        tied = [blog("a", "A", 3), blog("b", "B", 3)]

        assert favorite_blog(tied).title == "a"


class TestMostBlogs:
    def test_empty(self) -> None:
        assert most_blogs([]) is None

    def test_many(self, blogs: list[BlogDB]) -> None:
        assert most_blogs(blogs) == AuthorBlogCount(author="Robert C. Martin", blogs=3)

    def test_tie_goes_to_first_author(self) -> None:
        tied = [blog("a", "B", 1), blog("b", "A", 1), blog("c", "A", 1), blog("d", "B", 1)]

        assert most_blogs(tied) == AuthorBlogCount(author="B", blogs=2)

    def test_blogs_without_author_are_ignored(self) -> None:
        items = [blog("a", None, 1), blog("b", None, 1), blog("c", "A", 1)]

        assert most_blogs(items) == AuthorBlogCount(author="A", blogs=1)
        assert most_blogs([blog("a", None, 1)]) is None


class TestMostLikes:
    def test_empty(self) -> None:
        assert most_likes([]) is None

    def test_many(self, blogs: list[BlogDB]) -> None:
        assert most_likes(blogs) == AuthorLikes(author="Edsger W. Dijkstra", likes=17)

    def test_tie_goes_to_first_author(self) -> None:
        tied = [blog("a", "B", 4), blog("b", "A", 5), blog("c", "B", 1)]

        assert most_likes(tied) == AuthorLikes(author="B", likes=5)


def test_inputs_are_not_mutated(blogs: list[BlogDB]) -> None:
    snapshot = [(b.title, b.author, b.likes) for b in blogs]
    order = [b.id for b in blogs]

    total_likes(blogs)
    favorite_blog(blogs)
    most_blogs(blogs)
    most_likes(blogs)

    assert [(b.title, b.author, b.likes) for b in blogs] == snapshot
    assert [b.id for b in blogs] == order


def test_generators_are_accepted(blogs: list[BlogDB]) -> None:
    assert total_likes(b for b in blogs) == 36
    assert most_likes(b for b in blogs) == AuthorLikes(author="Edsger W. Dijkstra", likes=17)
