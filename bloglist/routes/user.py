"""
User Routes.

Registration and listing. Neither endpoint requires authentication.
"""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from bloglist.dependencies import UserServiceDep
from bloglist.schemas.user import UserCreate, UserResponse, UserWithBlogs
from bloglist.services.user import to_user_response

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174000",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                        "blogs": [],
                    },
                },
            },
        },
        400: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {"error": "expected `username` to be unique", "field": "username"},
                },
            },
        },
    },
    operation_id="users_create",
)
async def create_user(user: UserCreate, service: UserServiceDep) -> UserResponse:
    """
    Register a new user.

    Rules, checked in order: username present, username at least 3
    characters, password at least 3 characters, username unique.
    """
    return to_user_response(await service.create_user(user))


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserWithBlogs],
    summary="List users",
    description="List every user together with the blogs they own.",
    operation_id="users_list",
)
async def list_users(service: UserServiceDep) -> list[UserWithBlogs]:
    return await service.list_users()
