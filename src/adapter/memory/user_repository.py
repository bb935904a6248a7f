"""In-memory implementation of UserRepository."""

import threading
import uuid
from logging import getLogger

import bcrypt

from domain.model.errors import DuplicateError, NotFoundError
from domain.model.user import ProviderCredential, User

logger = getLogger(__name__)

BCRYPT_ROUNDS = 12


class InMemoryUserRepository:
    def __init__(self, bcrypt_rounds: int = BCRYPT_ROUNDS):
        self.store: dict[str, User] = {}
        self.bcrypt_rounds = bcrypt_rounds
        # Guards self.store; the id/email check and the insert happen under one hold.
        self._lock = threading.Lock()

    def _hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.bcrypt_rounds)
        return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')

    @staticmethod
    def _copy(user: User) -> User:
        # Credentials are frozen, so a shallow copy of the list is enough.
        return user.with_provider_credentials(user.provider_credentials)

    def _snapshot(self) -> list[User]:
        with self._lock:
            return list(self.store.values())

    # ── write operations ─────────────────────────────────────

    def create(
        self,
        email: str,
        password: str,
        provider_credential: ProviderCredential,
        user_id: str | None = None,
    ) -> User:
        if user_id is None:
            user_id = uuid.uuid4().hex
        password_hash = self._hash_password(password)

        with self._lock:
            if user_id in self.store:
                raise DuplicateError(f"User id {user_id} already exists")
            if any(u.email == email for u in self.store.values()):
                raise DuplicateError(f"Email {email} already registered")

            user = User(
                id=user_id,
                email=email,
                password_hash=password_hash,
                provider_credentials=[provider_credential],
            )
            self.store[user_id] = user

        logger.info("User created", extra={"userId": user_id, "email": email})
        return self._copy(user)

    def update(self, user: User) -> None:
        with self._lock:
            if user.id not in self.store:
                raise NotFoundError(f"User {user.id} does not exist")
            self.store[user.id] = self._copy(user)

        logger.debug("User updated", extra={
            "userId": user.id,
            "credentialCount": len(user.provider_credentials),
        })

    # ── read operations ──────────────────────────────────────

    def list_all(self) -> list[User]:
        return [self._copy(user) for user in self._snapshot()]

    def user_exists(self, email: str) -> bool:
        return any(user.email == email for user in self._snapshot())

    def get_by_id(self, user_id: str) -> User | None:
        with self._lock:
            user = self.store.get(user_id)
        if not user:
            return None
        return self._copy(user)

    def login(self, email: str, password: str) -> User | None:
        user = next((u for u in self._snapshot() if u.email == email), None)
        if user is None:
            return None
        if user.password_hash and bcrypt.checkpw(
            password.encode('utf-8'), user.password_hash.encode('utf-8')
        ):
            return self._copy(user)
        logger.debug("Password mismatch", extra={"userId": user.id})
        return None
