from typing import Protocol, runtime_checkable
from domain.model.user import ProviderCredential, User


@runtime_checkable
class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Implementations own password hashing and email uniqueness at the storage
    level. Writes are whole-record: update() replaces the stored user by id.
    """
    def list_all(self) -> list[User]:
        """Return every stored user, in the store's own order."""
        ...

    def user_exists(self, email: str) -> bool:
        """Return True if a user with exactly this email is stored."""
        ...

    def create(
        self,
        email: str,
        password: str,
        provider_credential: ProviderCredential,
        user_id: str | None = None,
    ) -> User:
        """Create a new user, assigning an id when none is given. Return the User."""
        ...

    def update(self, user: User) -> None:
        """Overwrite the stored user that has user.id."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def login(self, email: str, password: str) -> User | None:
        """Verify credentials. Return the matching User or None."""
        ...
