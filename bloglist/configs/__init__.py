from bloglist.configs.settings import (
    CONFIG_MAP,
    MAX_USERNAME_LENGTH,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
    file_logger,
    settings,
)

__all__ = [
    "CONFIG_MAP",
    "MAX_USERNAME_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "MIN_USERNAME_LENGTH",
    "file_logger",
    "settings",
]
