from bloglist.schemas.auth import LoginRequest, LoginResponse, TokenData
from bloglist.schemas.blog import (
    BlogCreate,
    BlogResponse,
    BlogUpdate,
    CommentAuthor,
    CommentCreate,
    CommentResponse,
    OwnerResponse,
)
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.statistics import AuthorBlogCount, AuthorLikes, FavoriteBlog
from bloglist.schemas.user import BlogSummary, UserCreate, UserResponse, UserWithBlogs

__all__ = [
    "AuthorBlogCount",
    "AuthorLikes",
    "BlogCreate",
    "BlogResponse",
    "BlogSummary",
    "BlogUpdate",
    "CommentAuthor",
    "CommentCreate",
    "CommentResponse",
    "FavoriteBlog",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "OwnerResponse",
    "TokenData",
    "UserCreate",
    "UserResponse",
    "UserWithBlogs",
]
