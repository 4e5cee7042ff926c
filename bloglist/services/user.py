"""User registration and listing."""

from bloglist.configs import MAX_USERNAME_LENGTH, MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from bloglist.errors.database import DuplicateEntryError
from bloglist.errors.validation import ValidationError
from bloglist.managers.password_manager import hash_password
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.schemas.user import BlogSummary, UserCreate, UserResponse, UserWithBlogs
from bloglist.utils.helpers import try_parse_uuid

logger = get_logger(__name__)

USERNAME_NOT_UNIQUE = "expected `username` to be unique"


def validate_username(username: str | None) -> str:
    """
    Check presence and length bounds of a username.

    Raises:
        ValidationError: naming the `username` field
    """
    if not username:
        raise ValidationError("username is required", field="username")
    if len(username) < MIN_USERNAME_LENGTH:
        msg = f"username must be at least {MIN_USERNAME_LENGTH} characters long"
        raise ValidationError(msg, field="username")
    if len(username) > MAX_USERNAME_LENGTH:
        msg = f"username must be at most {MAX_USERNAME_LENGTH} characters long"
        raise ValidationError(msg, field="username")
    return username


def validate_password(password: str | None) -> str:
    """
    Check presence and minimum length of a plaintext password.

    The stored hash is always long, so this is the only place the rule can
    be enforced.

    Raises:
        ValidationError: naming the `password` field
    """
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        msg = (
            f"please enter a password that is at least {MIN_PASSWORD_LENGTH} characters long"
        )
        raise ValidationError(msg, field="password")
    return password


def to_user_response(user: UserDB) -> UserResponse:
    """Serialize a user without its storage key, hash or timestamps."""
    blog_ids = [bid for bid in (try_parse_uuid(b) for b in user.blog_ids) if bid is not None]
    return UserResponse(id=user.uuid, username=user.username, name=user.name, blogs=blog_ids)


class UserService:
    """Service for creating and listing users."""

    def __init__(self, user_repo: UserRepository, blog_repo: BlogRepository) -> None:
        self.user_repo = user_repo
        self.blog_repo = blog_repo

    async def create_user(self, payload: UserCreate) -> UserDB:
        """
        Validate and register a new user.

        Checks run in a fixed order before anything is written: username
        presence, username length, password, then uniqueness.

        Args:
            payload: Registration body

        Returns:
            UserDB: The stored user

        Raises:
            ValidationError: For the first rule the payload breaks
        """
        username = validate_username(payload.username)
        password = validate_password(payload.password)

        if await self.user_repo.username_exists(username):
            raise ValidationError(USERNAME_NOT_UNIQUE, field="username")

        password_hash = await hash_password(password)
        try:
            user = await self.user_repo.create(
                username=username,
                password_hash=password_hash,
                name=payload.name,
            )
        except DuplicateEntryError as e:
            # Lost a race with a concurrent registration
            raise ValidationError(USERNAME_NOT_UNIQUE, field="username") from e

        logger.info("User created", user_id=str(user.uuid))
        return user

    async def list_users(self) -> list[UserWithBlogs]:
        """
        List every user with the blogs they own.

        Each user's `blog_ids` is resolved against one bulk blog query; ids
        that no longer resolve are left out.
        """
        users = await self.user_repo.get_all()
        wanted = {
            blog_id
            for user in users
            for blog_id in (try_parse_uuid(raw) for raw in user.blog_ids)
            if blog_id is not None
        }
        blogs = await self.blog_repo.get_many(wanted)

        def owned(user: UserDB) -> list[BlogSummary]:
            summaries = []
            for raw in user.blog_ids:
                blog = blogs.get(try_parse_uuid(raw))
                if blog is not None:
                    summaries.append(BlogSummary.model_validate(blog))
            return summaries

        return [
            UserWithBlogs(
                id=user.uuid,
                username=user.username,
                name=user.name,
                blogs=owned(user),
            )
            for user in users
        ]
