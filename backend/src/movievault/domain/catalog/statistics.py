"""Collection statistics over one owner's movies."""
from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal

from .entities import Movie

_TWO_PLACES = Decimal("0.01")
_ZERO = Decimal("0")


@dataclass(frozen=True)
class MovieStats:
    total_movies: int
    total_genres: int
    top_genre: str
    top_genre_count: int
    average_rating: Decimal
    highest_rating: Decimal
    lowest_rating: Decimal
    total_directors: int
    most_featured_director: str
    most_featured_director_count: int

    @classmethod
    def empty(cls) -> MovieStats:
        return cls(
            total_movies=0,
            total_genres=0,
            top_genre="",
            top_genre_count=0,
            average_rating=_ZERO,
            highest_rating=_ZERO,
            lowest_rating=_ZERO,
            total_directors=0,
            most_featured_director="",
            most_featured_director_count=0,
        )


def _group_counts(movies: list[Movie], key: Callable[[Movie], str]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for movie in movies:
        counts[key(movie)] = counts.get(key(movie), 0) + 1
    return counts


def _top(counts: dict[str, int]) -> tuple[str, int]:
    # max() keeps the first maximal item, so ties go to the group seen first
    return max(counts.items(), key=lambda item: item[1])


def compute_stats(movies: Iterable[Movie]) -> MovieStats:
    """Aggregate genre, director and rating figures.

    ``average_rating`` is rounded to two places with ROUND_HALF_EVEN.
    An empty collection yields :meth:`MovieStats.empty`.
    """
    movies = list(movies)
    if not movies:
        return MovieStats.empty()

    genres = _group_counts(movies, lambda m: m.genre)
    directors = _group_counts(movies, lambda m: m.director)
    top_genre, top_genre_count = _top(genres)
    top_director, top_director_count = _top(directors)

    ratings = [m.rating for m in movies]
    average = (sum(ratings, _ZERO) / len(ratings)).quantize(_TWO_PLACES, rounding=ROUND_HALF_EVEN)

    return MovieStats(
        total_movies=len(movies),
        total_genres=len(genres),
        top_genre=top_genre,
        top_genre_count=top_genre_count,
        average_rating=average,
        highest_rating=max(ratings),
        lowest_rating=min(ratings),
        total_directors=len(directors),
        most_featured_director=top_director,
        most_featured_director_count=top_director_count,
    )
