"""MovieVaultFacade: the single entry point to the application layer.

All routers go through this facade instead of calling application functions directly.
This enforces the Facade pattern and keeps the API layer thin.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from movievault.application.catalog import commands as catalog_commands
from movievault.application.catalog import queries as catalog_queries
from movievault.application.identity import commands as id_commands
from movievault.application.identity import queries as id_queries
from movievault.application.outcome import Outcome
from movievault.domain.catalog.entities import Movie
from movievault.domain.catalog.repositories import IMovieRepository
from movievault.domain.clock import SYSTEM_CLOCK, Clock
from movievault.domain.identity.entities import User
from movievault.domain.identity.repositories import IUserRepository
from movievault.infrastructure.auth.jwt import TokenService

if TYPE_CHECKING:
    from movievault.application.identity.commands import AuthResult
    from movievault.domain.catalog.statistics import MovieStats


class MovieVaultFacade:
    """Aggregates all application use cases. Injected via FastAPI dependency."""

    def __init__(
        self,
        user_repo: IUserRepository,
        movie_repo: IMovieRepository,
        tokens: TokenService,
        clock: Clock = SYSTEM_CLOCK,
    ) -> None:
        self._user_repo = user_repo
        self._movie_repo = movie_repo
        self._tokens = tokens
        self._clock = clock

    # ── Identity ──────────────────────────────────────────────────────────────

    async def register(self, command: id_commands.RegisterUser) -> Outcome["AuthResult"]:
        return await id_commands.register_user(command, user_repo=self._user_repo, tokens=self._tokens)

    async def login(self, command: id_commands.LoginUser) -> Outcome["AuthResult"]:
        return await id_commands.login_user(command, user_repo=self._user_repo, tokens=self._tokens)

    async def get_current_user(self, user_id: int) -> Outcome[User]:
        return await id_queries.get_user_by_id(user_id, self._user_repo)

    # ── Movies ────────────────────────────────────────────────────────────────

    async def list_movies(self, query: catalog_queries.ListMovies) -> Outcome[list[Movie]]:
        return await catalog_queries.list_movies(query, repo=self._movie_repo)

    async def search_movies(self, query: catalog_queries.SearchMovies) -> Outcome[list[Movie]]:
        return await catalog_queries.search_movies(query, repo=self._movie_repo)

    async def get_movie(self, query: catalog_queries.GetMovieById) -> Outcome[Movie]:
        return await catalog_queries.get_movie_by_id(query, repo=self._movie_repo)

    async def get_movie_stats(self, query: catalog_queries.GetMovieStats) -> Outcome["MovieStats"]:
        return await catalog_queries.get_movie_stats(query, repo=self._movie_repo)

    async def create_movie(self, command: catalog_commands.CreateMovie) -> Outcome[Movie]:
        return await catalog_commands.create_movie(command, repo=self._movie_repo, clock=self._clock)

    async def update_movie(self, command: catalog_commands.UpdateMovie) -> Outcome[Movie]:
        return await catalog_commands.update_movie(command, repo=self._movie_repo, clock=self._clock)

    async def delete_movie(self, command: catalog_commands.DeleteMovie) -> Outcome[None]:
        return await catalog_commands.delete_movie(command, repo=self._movie_repo)
