"""Authentication service: credential checks and token resolution."""

from datetime import timedelta

from bloglist.errors.auth import InvalidCredentialsError, TokenMissingOrInvalidError
from bloglist.managers.password_manager import dummy_verify, verify_password
from bloglist.managers.token_manager import create_access_token, decode_access_token
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import UserRepository
from bloglist.schemas.auth import LoginResponse

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str | None, password: str | None) -> UserDB:
        """
        Authenticate a user by username and password.

        An unknown username still costs one hash verification, so both
        failure paths take the same route to the same error.

        Args:
            username: Exact username
            password: Plaintext password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_username(username) if username else None

        if user is None or not password:
            await dummy_verify()
            raise InvalidCredentialsError

        if not await verify_password(password, user.password_hash):
            raise InvalidCredentialsError

        return user

    async def authenticate(
        self,
        username: str | None,
        password: str | None,
        expires_delta: timedelta | None = None,
    ) -> LoginResponse:
        """
        Verify credentials and issue an access token.

        Args:
            username: Exact username
            password: Plaintext password
            expires_delta: Token lifetime; defaults to ACCESS_TOKEN_EXPIRE_MINUTES

        Returns:
            LoginResponse: `{token, username, name}`

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.authenticate_user(username, password)
        token = create_access_token(
            user_id=user.uuid,
            username=user.username,
            expires_delta=expires_delta,
        )
        logger.info("User logged in", user_id=str(user.uuid))
        return LoginResponse(token=token, username=user.username, name=user.name)

    async def resolve(self, token: str | None) -> UserDB:
        """
        Resolve a bearer token to the user it was issued for.

        Args:
            token: Extracted token, or None when the request carried none

        Returns:
            UserDB: The token's user

        Raises:
            TokenExpiredError: If the token is genuine but expired
            TokenMissingOrInvalidError: If the token is absent, invalid or its
                user no longer exists
        """
        token_data = decode_access_token(token)

        user = await self.user_repo.get_by_id(token_data.user_id)
        if user is None:
            logger.warning("Token refers to a missing user", user_id=str(token_data.user_id))
            raise TokenMissingOrInvalidError

        return user
