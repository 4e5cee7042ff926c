from bloglist.dependencies.dependencies import (
    AuthServiceDep,
    BlogRepoDep,
    BlogServiceDep,
    CurrentUserDep,
    SessionDep,
    UserRepoDep,
    UserServiceDep,
    get_bearer_token,
    get_current_user,
)

__all__ = [
    "AuthServiceDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "CurrentUserDep",
    "SessionDep",
    "UserRepoDep",
    "UserServiceDep",
    "get_bearer_token",
    "get_current_user",
]
