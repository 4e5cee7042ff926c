"""Result shapes of the blog statistics."""

from pydantic import BaseModel


class FavoriteBlog(BaseModel):
    title: str
    author: str | None = None
    likes: int


class AuthorBlogCount(BaseModel):
    author: str
    blogs: int


class AuthorLikes(BaseModel):
    author: str
    likes: int
