from dataclasses import dataclass, field
from enum import Enum


class ProviderType(str, Enum):
    """External services a user can register credentials for."""
    GITHUB = 'github'


@dataclass(frozen=True)
class ProviderCredential:
    """Authentication attributes for one external provider, owned by one user."""
    id: str | None = None
    email: str | None = None
    api_token: str | None = None
    full_name: str | None = None
    provider: ProviderType = ProviderType.GITHUB

    @property
    def has_token(self) -> bool:
        return bool(self.api_token)


@dataclass
class User:
    """Domain model representing a user and its provider credentials."""
    id: str
    email: str
    password_hash: str | None = None
    provider_credentials: list[ProviderCredential] = field(default_factory=list)

    def with_provider_credentials(self, credentials: list[ProviderCredential]) -> 'User':
        """Return a new User with the same identity and the given credentials.

        The receiver is left untouched; callers persist the returned value.
        """
        return User(
            id=self.id,
            email=self.email,
            password_hash=self.password_hash,
            provider_credentials=list(credentials),
        )
