"""Concrete SQLAlchemy repository implementations for the identity context."""
from dataclasses import replace

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from movievault.domain.identity.entities import User
from movievault.domain.identity.repositories import DuplicateUserError
from movievault.domain.identity.value_objects import Email, PasswordHash, Username
from movievault.infrastructure.database.models.identity import UserModel


class UserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: int) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return _to_user(result) if result else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        row = (await self._session.execute(stmt)).scalar_one_or_none()
        return _to_user(row) if row else None

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(UserModel.username == username)
        row = (await self._session.execute(stmt)).scalar_one_or_none()
        return _to_user(row) if row else None

    async def add(self, user: User) -> User:
        model = UserModel(
            email=str(user.email),
            username=str(user.username),
            password_hash=str(user.password_hash),
            created_at=user.created_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Registration writes nothing else, so dropping the transaction loses nothing
            await self._session.rollback()
            raise DuplicateUserError(str(user.email)) from exc
        return replace(user, id=model.id)

    async def save(self, user: User) -> User:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            raise LookupError(f"User {user.id} is not stored")
        model.email = str(user.email)
        model.username = str(user.username)
        model.password_hash = str(user.password_hash)
        await self._session.flush()
        return user

    async def commit(self) -> None:
        await self._session.commit()


# ── Mappers ───────────────────────────────────────────────────────────────────

def _to_user(m: UserModel) -> User:
    return User(
        id=m.id,
        email=Email(m.email),
        username=Username(m.username),
        password_hash=PasswordHash(m.password_hash),
        created_at=m.created_at,
    )
