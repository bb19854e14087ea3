"""Catalog use-case queries, including collection statistics."""
from __future__ import annotations

from dataclasses import dataclass

from movievault.application.outcome import ErrorKind, Failure, Outcome
from movievault.domain.catalog.entities import Movie
from movievault.domain.catalog.policies import authorize
from movievault.domain.catalog.repositories import IMovieRepository
from movievault.domain.catalog.statistics import MovieStats, compute_stats


def movie_not_found(movie_id: int) -> Failure:
    return Failure(ErrorKind.NOT_FOUND, f"Movie with ID {movie_id} not found")


@dataclass(frozen=True)
class GetMovieById:
    movie_id: int
    caller_id: int


@dataclass(frozen=True)
class ListMovies:
    caller_id: int


@dataclass(frozen=True)
class SearchMovies:
    caller_id: int
    keyword: str


@dataclass(frozen=True)
class GetMovieStats:
    caller_id: int


async def get_movie_by_id(query: GetMovieById, *, repo: IMovieRepository) -> Outcome[Movie]:
    """Absent and not-owned are reported separately; the HTTP layer decides how much to reveal."""
    movie = await repo.get_by_id(query.movie_id)
    if movie is None:
        return Outcome(error=movie_not_found(query.movie_id))
    if not authorize(movie.owner_id, query.caller_id):
        return Outcome.failure(ErrorKind.FORBIDDEN, "You do not have permission to view this movie")
    return Outcome.success(movie)


async def list_movies(query: ListMovies, *, repo: IMovieRepository) -> Outcome[list[Movie]]:
    return Outcome.success(await repo.list_by_owner(query.caller_id))


async def search_movies(query: SearchMovies, *, repo: IMovieRepository) -> Outcome[list[Movie]]:
    keyword = query.keyword.strip() if query.keyword else ""
    if not keyword:
        return Outcome.failure(ErrorKind.INVALID_ARGUMENT, "Keyword cannot be empty", "keyword")
    movies = await repo.list_by_owner(query.caller_id)
    return Outcome.success([m for m in movies if m.matches(keyword)])


async def get_movie_stats(query: GetMovieStats, *, repo: IMovieRepository) -> Outcome[MovieStats]:
    return Outcome.success(compute_stats(await repo.list_by_owner(query.caller_id)))
