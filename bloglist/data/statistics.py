"""
Blog statistics.

Pure functions over an in-memory collection of blogs. Anything exposing
`title`, `author` and `likes` attributes works, which includes `BlogDB`
rows and `BlogResponse` objects. None of them mutate their input.
"""

from collections import Counter
from collections.abc import Iterable
from typing import Protocol

from bloglist.schemas.statistics import AuthorBlogCount, AuthorLikes, FavoriteBlog


class BlogLike(Protocol):
    title: str
    author: str | None
    likes: int


def total_likes(blogs: Iterable[BlogLike]) -> int:
    """Sum of likes over all blogs; 0 when there are none."""
    return sum(blog.likes for blog in blogs)


def favorite_blog(blogs: Iterable[BlogLike]) -> FavoriteBlog | None:
    """
    Return the blog with the most likes.

    Ties go to the blog that comes first.

    Args:
        blogs: Blogs to inspect.

    Returns:
        FavoriteBlog | None: `{title, author, likes}` or None for no blogs.
    """
    favorite: BlogLike | None = None
    for blog in blogs:
        if favorite is None or blog.likes > favorite.likes:
            favorite = blog

    if favorite is None:
        return None
    return FavoriteBlog(title=favorite.title, author=favorite.author, likes=favorite.likes)


def most_blogs(blogs: Iterable[BlogLike]) -> AuthorBlogCount | None:
    """
    Return the author with the most blogs.

    Counter keeps first-seen order, so `most_common` breaks ties in favour of
    the author encountered first. Blogs without an author are skipped.
    """
    counts = Counter(blog.author for blog in blogs if blog.author is not None)
    if not counts:
        return None

    author, count = counts.most_common(1)[0]
    return AuthorBlogCount(author=author, blogs=count)


def most_likes(blogs: Iterable[BlogLike]) -> AuthorLikes | None:
    """
    Return the author whose blogs have the most likes in total.

    Ties go to the author encountered first. Blogs without an author are
    skipped.
    """
    likes_by_author: dict[str, int] = {}
    for blog in blogs:
        if blog.author is None:
            continue
        likes_by_author[blog.author] = likes_by_author.get(blog.author, 0) + blog.likes

    if not likes_by_author:
        return None

    author, likes = max(likes_by_author.items(), key=lambda item: item[1])
    return AuthorLikes(author=author, likes=likes)
