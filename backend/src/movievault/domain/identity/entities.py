"""Domain entities for the Identity bounded context."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .value_objects import Email, PasswordHash, Username


@dataclass
class User:
    id: int | None
    email: Email
    username: Username
    password_hash: PasswordHash
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, *, username: str, email: str, password_hash: PasswordHash | str) -> User:
        """Build a new, not yet persisted user. The repository assigns ``id``."""
        return cls(
            id=None,
            email=Email(email),
            username=Username(username),
            password_hash=(
                password_hash if isinstance(password_hash, PasswordHash) else PasswordHash(password_hash)
            ),
        )

    def update_password_hash(self, new_hash: PasswordHash | str) -> None:
        self.password_hash = new_hash if isinstance(new_hash, PasswordHash) else PasswordHash(new_hash)
