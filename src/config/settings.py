"""Environment-driven settings, read once at composition time."""

import os
from dataclasses import dataclass

DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_BCRYPT_ROUNDS = 12


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS


def load_settings() -> Settings:
    """Read settings from the environment.

    LOG_LEVEL: root log level (default INFO)
    BCRYPT_ROUNDS: cost factor for the in-memory store's password hashes (default 12)
    """
    return Settings(
        log_level=os.getenv('LOG_LEVEL', DEFAULT_LOG_LEVEL).upper(),
        bcrypt_rounds=int(os.getenv('BCRYPT_ROUNDS', DEFAULT_BCRYPT_ROUNDS)),
    )
