"""Catalog use-case commands: create, update and delete movies."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal

from movievault.application.catalog.queries import movie_not_found
from movievault.application.outcome import ErrorKind, Outcome
from movievault.domain.catalog.entities import Movie
from movievault.domain.catalog.policies import authorize
from movievault.domain.catalog.repositories import IMovieRepository
from movievault.domain.clock import SYSTEM_CLOCK, Clock
from movievault.domain.errors import ValidationError

logger = logging.getLogger("movievault.catalog")


@dataclass(frozen=True)
class CreateMovie:
    owner_id: int
    title: str
    director: str
    genre: str
    release_year: int
    rating: Decimal


@dataclass(frozen=True)
class UpdateMovie:
    """Fields left as ``None`` keep their current value."""
    movie_id: int
    caller_id: int
    title: str | None = None
    director: str | None = None
    genre: str | None = None
    release_year: int | None = None
    rating: Decimal | None = None


@dataclass(frozen=True)
class DeleteMovie:
    movie_id: int
    caller_id: int


def _not_found(movie_id: int) -> Outcome:
    return Outcome(error=movie_not_found(movie_id))


async def create_movie(
    command: CreateMovie,
    *,
    repo: IMovieRepository,
    clock: Clock = SYSTEM_CLOCK,
) -> Outcome[Movie]:
    try:
        movie = Movie.create(
            owner_id=command.owner_id,
            title=command.title,
            director=command.director,
            genre=command.genre,
            release_year=command.release_year,
            rating=command.rating,
            clock=clock,
        )
    except ValidationError as exc:
        return Outcome.failure(ErrorKind.VALIDATION, exc.reason, exc.field)

    movie = await repo.add(movie)
    await repo.commit()
    logger.info("User id=%s created movie id=%s", command.owner_id, movie.id)
    return Outcome.success(movie)


async def update_movie(
    command: UpdateMovie,
    *,
    repo: IMovieRepository,
    clock: Clock = SYSTEM_CLOCK,
) -> Outcome[Movie]:
    movie = await repo.get_by_id(command.movie_id)
    if movie is None:
        return _not_found(command.movie_id)
    if not authorize(movie.owner_id, command.caller_id):
        logger.warning("User id=%s tried to update movie id=%s", command.caller_id, movie.id)
        return Outcome.failure(ErrorKind.FORBIDDEN, "You do not have permission to update this movie")

    # Apply to a copy so a rejected field leaves the loaded movie untouched
    updated = replace(movie)
    try:
        if command.title is not None:
            updated.update_title(command.title)
        if command.director is not None:
            updated.update_director(command.director)
        if command.genre is not None:
            updated.update_genre(command.genre)
        if command.release_year is not None:
            updated.update_release_year(command.release_year, clock)
        if command.rating is not None:
            updated.update_rating(command.rating)
    except ValidationError as exc:
        return Outcome.failure(ErrorKind.VALIDATION, exc.reason, exc.field)

    updated = await repo.save(updated)
    await repo.commit()
    logger.info("User id=%s updated movie id=%s", command.caller_id, updated.id)
    return Outcome.success(updated)


async def delete_movie(command: DeleteMovie, *, repo: IMovieRepository) -> Outcome[None]:
    movie = await repo.get_by_id(command.movie_id)
    if movie is None:
        return _not_found(command.movie_id)
    if not authorize(movie.owner_id, command.caller_id):
        logger.warning("User id=%s tried to delete movie id=%s", command.caller_id, movie.id)
        return Outcome.failure(ErrorKind.FORBIDDEN, "You do not have permission to delete this movie")

    if not await repo.remove(movie.id):
        return _not_found(command.movie_id)
    await repo.commit()
    logger.info("User id=%s deleted movie id=%s", command.caller_id, movie.id)
    return Outcome.success(None)
