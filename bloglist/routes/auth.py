"""Login route."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from bloglist.dependencies import AuthServiceDep
from bloglist.schemas.auth import LoginRequest, LoginResponse

router = APIRouter(prefix="/login", tags=["Authentication"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=LoginResponse,
    summary="Log in",
    description="Exchange a username and password for a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {"example": {"error": "invalid username or password"}},
            },
        },
    },
    operation_id="login",
)
async def login(credentials: LoginRequest, service: AuthServiceDep) -> LoginResponse:
    return await service.authenticate(credentials.username, credentials.password)
