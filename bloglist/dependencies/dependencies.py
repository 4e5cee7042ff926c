"""Application dependencies: repositories, services and authentication."""

from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import get_session
from bloglist.managers.token_manager import extract_bearer_token
from bloglist.models import UserDB
from bloglist.monitoring import bind_user_id
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.services import AuthService, BlogService, UserService

# Function scope: the commit finishes before the response is sent
SessionDep = Annotated[AsyncSession, Depends(get_session, scope="function")]


def get_user_repository(session: SessionDep) -> UserRepository:
    """Resolve the `UserRepository` dependency."""
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """Resolve the `BlogRepository` dependency."""
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


def get_user_service(user_repo: UserRepoDep, blog_repo: BlogRepoDep) -> UserService:
    return UserService(user_repo, blog_repo)


def get_blog_service(blog_repo: BlogRepoDep, user_repo: UserRepoDep) -> BlogService:
    return BlogService(blog_repo, user_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]


def get_bearer_token(
    authorization: Annotated[str | None, Header()] = None,
) -> str | None:
    """
    Extract the bearer token from the `Authorization` header.

    Never fails; a missing or non-Bearer header simply yields None.
    """
    return extract_bearer_token(authorization)


async def get_current_user(
    request: Request,
    token: Annotated[str | None, Depends(get_bearer_token)],
    auth_service: AuthServiceDep,
) -> UserDB:
    """
    Resolve the request's bearer token to a user.

    The user is also stored on `request.state.user` and its id is bound to
    the logging context for the rest of the request.

    Raises:
        TokenMissingOrInvalidError: If no valid token was sent
        TokenExpiredError: If the token has expired
    """
    user = await auth_service.resolve(token)
    request.state.user = user
    bind_user_id(str(user.uuid))
    return user


CurrentUserDep = Annotated[UserDB, Depends(get_current_user)]
