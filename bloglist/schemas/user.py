"""
User schemas.

Every outward representation exposes the storage key as `id` and never the
password hash or timestamps.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """
    User registration body.

    Fields are optional here; presence and length rules are checked by
    `bloglist.services.user` so that each failure has its own message.
    """

    username: str | None = Field(default=None, examples=["mluukkai"])
    name: str | None = Field(default=None, examples=["Matti Luukkainen"])
    password: str | None = Field(default=None, examples=["salainen"])


class BlogSummary(BaseModel):
    """Blog as listed under its owner."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int = 0


class UserResponse(BaseModel):
    """Public user representation."""

    id: UUID = Field(..., description="User ID")
    username: str
    name: str | None = None
    blogs: list[UUID] = Field(default_factory=list, description="IDs of owned blogs")


class UserWithBlogs(BaseModel):
    """Public user representation with owned blogs resolved."""

    id: UUID
    username: str
    name: str | None = None
    blogs: list[BlogSummary] = Field(default_factory=list)
