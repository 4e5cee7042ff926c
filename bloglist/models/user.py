"""User database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class UserDB(SQLModel, table=True):
    """
    User database model.

    `uuid` is the internal storage identifier; it is exposed to clients only
    as `id`. `blog_ids` is the back-reference to every blog the user owns and
    is written exclusively by the blog aggregate (create/delete).
    """

    __tablename__ = cast("declared_attr[str]", "users")

    # Primary key
    uuid: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )

    # Required fields
    username: str = Field(
        sa_column=Column(String(50), unique=True, nullable=False, index=True),
        description="Username (unique)",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Hashed password",
    )

    # Optional profile fields
    name: str | None = Field(
        default=None,
        sa_column=Column(String(200)),
        description="Display name",
    )

    # Owned blogs (ids as strings)
    blog_ids: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="IDs of the blogs owned by this user",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "uuid": "123e4567-e89b-12d3-a456-426614174000",
                "username": "mluukkai",
                "name": "Matti Luukkainen",
                "blog_ids": ["550e8400-e29b-41d4-a716-446655440000"],
            },
        },
    )
