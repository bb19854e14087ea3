"""Pydantic v2 schemas for movie endpoints."""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_serializer


class MovieCreate(BaseModel):
    title: str
    director: str
    genre: str
    release_year: int
    rating: Decimal


class MovieReplace(MovieCreate):
    """PUT body: every field is required and replaces the stored value."""


class MovieUpdate(BaseModel):
    title: str | None = None
    director: str | None = None
    genre: str | None = None
    release_year: int | None = None
    rating: Decimal | None = None


class MovieResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    director: str
    genre: str
    release_year: int
    rating: Decimal

    @field_serializer("rating")
    def _rating_as_number(self, value: Decimal) -> float:
        return float(value)


class MovieStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

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

    @field_serializer("average_rating", "highest_rating", "lowest_rating")
    def _ratings_as_numbers(self, value: Decimal) -> float:
        return float(value)
