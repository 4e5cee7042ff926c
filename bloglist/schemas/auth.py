"""Schemas for login and decoded access tokens."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """
    Login request body.

    Both fields are optional at the schema level so that a missing field is
    reported as invalid credentials rather than a body validation error.
    """

    username: str | None = Field(default=None, examples=["mluukkai"])
    password: str | None = Field(default=None, examples=["salainen"])


class LoginResponse(BaseModel):
    """Successful login response."""

    token: str = Field(..., description="Bearer access token")
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    username: str
    user_id: UUID
    jti: str
    token_type: str = "access"
    expires_at: datetime
