"""Blog and comment schemas."""

from uuid import UUID

from pydantic import BaseModel, Field


class BlogCreate(BaseModel):
    """Blog creation body. `title` and `url` are checked by the blog service."""

    title: str | None = Field(default=None, examples=["React patterns"])
    author: str | None = Field(default=None, examples=["Michael Chan"])
    url: str | None = Field(default=None, examples=["https://reactpatterns.com/"])
    likes: int | None = Field(default=None, examples=[7])


class BlogUpdate(BaseModel):
    """
    Blog update body.

    Only fields present in the request are written; the owner is not
    accepted here at all.
    """

    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int | None = Field(default=None, examples=[8])


class CommentCreate(BaseModel):
    """Comment body."""

    text: str | None = Field(default=None, examples=["a classic"])


class OwnerResponse(BaseModel):
    """Blog owner as shown on a blog."""

    id: UUID
    username: str
    name: str | None = None


class CommentAuthor(BaseModel):
    """Comment author as shown on a blog."""

    username: str
    name: str | None = None


class CommentResponse(BaseModel):
    text: str
    user: CommentAuthor | None = None


class BlogResponse(BaseModel):
    """Blog with its owner and comment authors resolved."""

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int = 0
    user: OwnerResponse | None = None
    comments: list[CommentResponse] = Field(default_factory=list)
