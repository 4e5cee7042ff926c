"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing and verification are CPU-heavy, so the async module-level helpers
run them on a small thread pool instead of the event loop.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.configs import CONFIG_MAP, settings
from bloglist.decorators.with_retry import with_retry
from bloglist.errors.password_hasher import PasswordHashingError
from bloglist.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing and verification manager using the Argon2id algorithm.

    Wraps passlib's CryptContext with argon2 as the primary scheme and
    pbkdf2_sha256 kept only so old hashes still verify.
    """

    def __init__(self, level: str | None = None) -> None:
        """
        Initialize the PasswordHasher with Argon2id as the primary scheme.

        Args:
            level: Key into CONFIG_MAP; defaults to PASSWORD_SECURITY_LEVEL.
        """
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        config = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=config.memory_cost,
            argon2__time_cost=config.time_cost,
            argon2__parallelism=config.parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("sekret").startswith("$argon2id$")
            True
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            hashed_password = self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Failed to hash password")
            msg = "Failed to hash password"
            raise PasswordHashingError(msg) from e
        return hashed_password

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a hashed password.

        Args:
            password: The plaintext password to verify
            hashed_password: The hashed password to verify against

        Returns:
            bool: True if password matches, False otherwise

        Example:
            >>> hasher = PasswordHasher()
            >>> hashed = hasher.hash("sekret")
            >>> hasher.verify("sekret", hashed)
            True
            >>> hasher.verify("wrong", hashed)
            False
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False

    def dummy_verify(self) -> bool:
        """
        Spend the same effort as a real verification and fail.

        Used when the username does not exist so that the response time does
        not reveal which half of the credentials was wrong.
        """
        self.pwd_context.dummy_verify()
        return False


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """
    Get or create the default password hasher instance.

    Returns:
        PasswordHasher: The process-wide password hasher
    """
    global _default_hasher
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


@with_retry(base_delay=0.5, max_delay=5, exec_retry=PasswordHashingError)
async def hash_password(password: str) -> str:
    """
    Hash a password on the worker pool using the default hasher.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str) -> bool:
    """
    Verify a password on the worker pool using the default hasher.

    Args:
        password: The plaintext password to verify
        hashed_password: The hashed password to verify against

    Returns:
        bool: True if password matches, False otherwise
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )


async def dummy_verify() -> bool:
    """Run a throwaway verification on the worker pool; always False."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().dummy_verify,
    )
