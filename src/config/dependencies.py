"""Composition root: picks the user store the services run against."""

import logging

from dotenv import load_dotenv

from adapter.memory.user_repository import InMemoryUserRepository
from config.settings import Settings, load_settings
from port.user_repository import UserRepository
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)


def get_user_repo(
    repo: UserRepository | None = None,
    settings: Settings | None = None,
) -> UserRepository:
    """Return the injected store, or a new in-memory one when none is given.

    Raises:
        TypeError: repo does not implement UserRepository
    """
    if repo is not None:
        if not isinstance(repo, UserRepository):
            raise TypeError(
                f"repo must implement {UserRepository.__name__}, got {type(repo).__name__}"
            )
        return repo

    settings = settings or load_settings()
    logger.debug("No user store injected, using in-memory store")
    return InMemoryUserRepository(bcrypt_rounds=settings.bcrypt_rounds)


def bootstrap(repo: UserRepository | None = None) -> tuple[Settings, UserRepository]:
    """Load .env, configure logging and build the user store."""
    load_dotenv()
    settings = load_settings()
    setup_structured_logging(settings.log_level)
    return settings, get_user_repo(repo, settings)
