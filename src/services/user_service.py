"""User service — account creation, login and provider credential management.

Pure business logic over a UserRepository; holds no state of its own.
Store errors propagate unchanged. A missing user is reported as None on
lookups, and logged then ignored on credential mutations.

Every mutation persists a fully rebuilt User (see User.with_provider_credentials)
because stores overwrite whole records.
"""

import logging

from domain.model.user import ProviderCredential, ProviderType, User
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


# ── Users ────────────────────────────────────────────────────


def list_users(repo: UserRepository) -> list[User]:
    return repo.list_all()


def create_user(
    repo: UserRepository,
    email: str,
    password: str,
    user_id: str | None = None,
) -> User | None:
    """Create an account for email unless one already exists.

    Returns the created User, or None if the email is already registered.
    The existence check and the create are two separate store calls; a store
    that must never hold duplicate emails has to enforce it on create.
    """
    email = email.strip()

    if repo.user_exists(email):
        logger.debug("Account already exists", extra={"email": email})
        return None

    logger.debug("Creating account", extra={"email": email})
    provider_credential = ProviderCredential(email=email)
    return repo.create(
        email=email,
        password=password,
        provider_credential=provider_credential,
        user_id=user_id,
    )


def update_user(repo: UserRepository, user: User) -> None:
    repo.update(user)


def find_user(repo: UserRepository, user_id: str) -> User | None:
    return repo.get_by_id(user_id)


def login(repo: UserRepository, email: str, password: str) -> User | None:
    email = email.strip()
    logger.debug("Attempting login", extra={"email": email})
    return repo.login(email=email, password=password)


# ── Provider credentials ─────────────────────────────────────


def find_provider_credential(
    repo: UserRepository,
    user_id: str,
    provider: ProviderType = ProviderType.GITHUB,
) -> ProviderCredential | None:
    """Return the user's first credential for provider, or None."""
    user = find_user(repo, user_id)
    if user is None:
        return None
    return next(
        (c for c in user.provider_credentials if c.provider == provider),
        None,
    )


def create_provider_credential(
    repo: UserRepository,
    user_id: str,
    id: str | None = None,
    email: str | None = None,
    api_token: str | None = None,
    full_name: str | None = None,
) -> None:
    """Append a new provider credential to the user's credentials."""
    provider_credential = ProviderCredential(
        id=id, email=email, api_token=api_token, full_name=full_name
    )
    user = find_user(repo, user_id)

    if user is None:
        logger.error(
            "Can't create provider credential for user, since user does not exist",
            extra={"userId": user_id},
        )
        return

    new_user = user.with_provider_credentials(
        user.provider_credentials + [provider_credential]
    )
    update_user(repo, new_user)
    logger.info("Provider credential created", extra={"userId": user_id, "credentialId": id})


def update_provider_credential(
    repo: UserRepository,
    user_id: str,
    id: str | None,
    email: str | None = None,
    api_token: str | None = None,
    full_name: str | None = None,
) -> None:
    """Replace the credentials matching id with a newly built one.

    Every credential whose id equals `id` is dropped and the new credential
    is appended last, so the replaced credential changes position. When no
    credential matches (or `id` is None) this is a plain append. The new
    credential does not inherit `id`.
    """
    provider_credential = ProviderCredential(
        email=email, api_token=api_token, full_name=full_name
    )
    user = find_user(repo, user_id)

    if user is None:
        logger.error(
            "Can't update provider credential for user, since user does not exist",
            extra={"userId": user_id},
        )
        return

    kept = [
        c for c in user.provider_credentials
        if id is None or c.id != id
    ]
    removed = len(user.provider_credentials) - len(kept)

    update_user(repo, user.with_provider_credentials(kept + [provider_credential]))
    logger.info("Provider credential updated", extra={
        "userId": user_id,
        "credentialId": id,
        "removed": removed,
    })
