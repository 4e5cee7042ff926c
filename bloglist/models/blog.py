"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import Any, cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime, Index, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    Comments are embedded as an ordered JSON list of
    ``{"text": str, "user": "<user id>"}`` entries; they are only ever
    appended.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (Index("ix_blogs_owner_created", "owner_id", "created_at"),)

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Foreign key to User
    owner_id: UUID = Field(
        sa_column=Column(
            "owner_id",
            Uuid,
            ForeignKey("users.uuid", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Owner ID (foreign key to users.uuid)",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(300), nullable=False),
        description="Blog title",
    )
    url: str = Field(
        sa_column=Column(String(2048), nullable=False),
        description="Blog URL",
    )

    # Optional fields
    author: str | None = Field(
        default=None,
        sa_column=Column(String(200)),
        description="Blog author (free text)",
    )
    likes: int = Field(
        default=0,
        nullable=False,
        description="Like count",
    )

    comments: list[dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Ordered comments",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "owner_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Canonical string reduction",
                "author": "Edsger W. Dijkstra",
                "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
                "likes": 12,
                "comments": [{"text": "classic", "user": "123e4567-e89b-12d3-a456-426614174000"}],
            },
        },
    )
