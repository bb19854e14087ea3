from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from movievault.config import Settings
from movievault.domain.catalog.entities import Movie
from movievault.domain.clock import FixedClock
from movievault.domain.identity.entities import User
from movievault.domain.identity.repositories import DuplicateUserError
from movievault.infrastructure.auth.jwt import TokenService
from movievault.main import create_app

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
SECRET = "tests-secret-key"


class InMemoryUserRepository:
    def __init__(self) -> None:
        self.users: dict[int, User] = {}
        self.commits = 0
        self._next_id = 1

    async def get_by_id(self, user_id: int) -> User | None:
        user = self.users.get(user_id)
        return replace(user) if user else None

    async def get_by_email(self, email: str) -> User | None:
        return next((replace(u) for u in self.users.values() if str(u.email) == email), None)

    async def get_by_username(self, username: str) -> User | None:
        return next((replace(u) for u in self.users.values() if str(u.username) == username), None)

    async def add(self, user: User) -> User:
        for existing in self.users.values():
            if existing.email == user.email or existing.username == user.username:
                raise DuplicateUserError(str(user.email))
        stored = replace(user, id=self._next_id)
        self._next_id += 1
        self.users[stored.id] = stored
        return replace(stored)

    async def save(self, user: User) -> User:
        self.users[user.id] = replace(user)
        return user

    async def commit(self) -> None:
        self.commits += 1


class InMemoryMovieRepository:
    def __init__(self) -> None:
        self.movies: dict[int, Movie] = {}
        self.commits = 0
        self._next_id = 1

    async def get_by_id(self, movie_id: int) -> Movie | None:
        movie = self.movies.get(movie_id)
        return replace(movie) if movie else None

    async def list_by_owner(self, owner_id: int) -> list[Movie]:
        return [replace(m) for _, m in sorted(self.movies.items()) if m.owner_id == owner_id]

    async def add(self, movie: Movie) -> Movie:
        stored = replace(movie, id=self._next_id)
        self._next_id += 1
        self.movies[stored.id] = stored
        return replace(stored)

    async def save(self, movie: Movie) -> Movie:
        self.movies[movie.id] = replace(movie)
        return movie

    async def remove(self, movie_id: int) -> bool:
        return self.movies.pop(movie_id, None) is not None

    async def commit(self) -> None:
        self.commits += 1


def make_movie(owner_id: int = 1, **overrides) -> Movie:
    fields = dict(
        owner_id=owner_id,
        title="The Shawshank Redemption",
        director="Frank Darabont",
        genre="Drama",
        release_year=1994,
        rating=Decimal("9.3"),
        clock=FixedClock(NOW),
    )
    fields.update(overrides)
    return Movie.create(**fields)


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture()
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def movie_repo() -> InMemoryMovieRepository:
    return InMemoryMovieRepository()


@pytest.fixture()
def tokens() -> TokenService:
    return TokenService(SECRET, expire_minutes=60)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'movievault.sqlite3'}",
        secret_key=SECRET,
        environment="testing",
    )


@pytest.fixture()
def client(settings: Settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


def register(client: TestClient, username: str, email: str, password: str = "correct-horse") -> dict:
    response = client.post(
        "/api/v1/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
