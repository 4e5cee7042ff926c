"""Business logic layer."""

from bloglist.services.auth import AuthService
from bloglist.services.blog import BlogService
from bloglist.services.user import UserService

__all__ = ["AuthService", "BlogService", "UserService"]
