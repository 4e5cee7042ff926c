"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Bloglist backend application.
"""

from dataclasses import dataclass
from logging import INFO, Formatter, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3
MAX_USERNAME_LENGTH = 50


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Bloglist Backend"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/bloglist.log"
    PRODUCTION_FRONTEND_URL: str | None = None

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./bloglist.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # seconds

    # JWT Configuration
    SECRET_KEY: SecretStr = SecretStr("change-this-secret-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    JWT_ISSUER: str = "bloglist-backend"
    JWT_AUDIENCE: str = "bloglist-clients"

    # Password hashing
    PASSWORD_SECURITY_LEVEL: Literal["low", "medium", "high"] = "medium"


settings = Settings()


@dataclass(frozen=True)
class Argon2Config:
    """Argon2id cost parameters for one security level."""

    memory_cost: int  # KiB
    time_cost: int
    parallelism: int


CONFIG_MAP: dict[str, Argon2Config] = {
    "low": Argon2Config(memory_cost=8 * 1024, time_cost=1, parallelism=1),
    "medium": Argon2Config(memory_cost=64 * 1024, time_cost=2, parallelism=2),
    "high": Argon2Config(memory_cost=512 * 1024, time_cost=2, parallelism=2),
}


def file_logger(logger: Logger) -> Logger:
    """
    Attach the rotating file handler to `logger` when file logging is enabled.

    Args:
        logger: Logger to configure.

    Returns:
        Logger: The same logger, for chaining at module import time.
    """
    if not settings.LOG_TO_FILE:
        return logger

    log_file = Path(settings.LOG_FILE)
    if any(
        isinstance(h, RotatingFileHandler) and Path(h.baseFilename) == log_file.resolve()
        for h in logger.handlers
    ):
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
    handler.setLevel(INFO)
    handler.setFormatter(Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
