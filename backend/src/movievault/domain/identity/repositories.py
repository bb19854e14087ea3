"""Repository contracts for the Identity bounded context."""
from typing import Protocol

from .entities import User


class DuplicateUserError(Exception):
    """Raised by ``add`` when the email or username is already stored."""


class IUserRepository(Protocol):
    async def get_by_id(self, user_id: int) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def get_by_username(self, username: str) -> User | None: ...

    async def add(self, user: User) -> User:
        """Insert ``user`` and return a copy carrying the assigned id."""
        ...

    async def save(self, user: User) -> User: ...

    async def commit(self) -> None: ...
