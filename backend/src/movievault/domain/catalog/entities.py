"""Domain entities for the Catalog bounded context."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from movievault.domain.clock import SYSTEM_CLOCK, Clock
from movievault.domain.errors import ValidationError

TITLE_MAX_LENGTH = 200
DIRECTOR_MAX_LENGTH = 100
GENRE_MAX_LENGTH = 50
FIRST_MOVIE_YEAR = 1888
RELEASE_YEAR_LOOKAHEAD = 5
RATING_MIN = Decimal("0")
RATING_MAX = Decimal("10")
RATING_STEP = Decimal("0.01")


@dataclass
class Movie:
    """A movie record in one user's private collection.

    Build new instances with :meth:`create` and change them through the
    ``update_*`` methods only; both run the same field validators. Direct
    construction is reserved for repositories rehydrating stored rows.
    """
    id: int | None
    owner_id: int
    title: str
    director: str
    genre: str
    release_year: int
    rating: Decimal
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        owner_id: int,
        title: str,
        director: str,
        genre: str,
        release_year: int,
        rating: Decimal | int | float | str,
        clock: Clock = SYSTEM_CLOCK,
    ) -> Movie:
        return cls(
            id=None,
            owner_id=owner_id,
            title=validate_title(title),
            director=validate_director(director),
            genre=validate_genre(genre),
            release_year=validate_release_year(release_year, clock),
            rating=validate_rating(rating),
        )

    def update_title(self, title: str) -> None:
        self.title = validate_title(title)

    def update_director(self, director: str) -> None:
        self.director = validate_director(director)

    def update_genre(self, genre: str) -> None:
        self.genre = validate_genre(genre)

    def update_release_year(self, release_year: int, clock: Clock = SYSTEM_CLOCK) -> None:
        self.release_year = validate_release_year(release_year, clock)

    def update_rating(self, rating: Decimal | int | float | str) -> None:
        self.rating = validate_rating(rating)

    def searchable_values(self) -> tuple[str, ...]:
        return (
            self.title,
            self.director,
            self.genre,
            str(self.release_year),
            format_rating(self.rating),
        )

    def matches(self, keyword: str) -> bool:
        """Case-insensitive substring match against any searchable field."""
        needle = keyword.casefold()
        return any(needle in value.casefold() for value in self.searchable_values())


# ── Validators ────────────────────────────────────────────────────────────────

def _validate_text(field_name: str, label: str, value: str, max_length: int) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field_name, f"{label} cannot be empty")
    if len(value) > max_length:
        raise ValidationError(field_name, f"{label} cannot exceed {max_length} characters")
    return value


def validate_title(title: str) -> str:
    return _validate_text("title", "Title", title, TITLE_MAX_LENGTH)


def validate_director(director: str) -> str:
    return _validate_text("director", "Director name", director, DIRECTOR_MAX_LENGTH)


def validate_genre(genre: str) -> str:
    return _validate_text("genre", "Genre", genre, GENRE_MAX_LENGTH)


def validate_release_year(release_year: int, clock: Clock = SYSTEM_CLOCK) -> int:
    latest = clock.now().year + RELEASE_YEAR_LOOKAHEAD
    if isinstance(release_year, bool) or not isinstance(release_year, int):
        raise ValidationError("release_year", "Release year must be an integer")
    if not FIRST_MOVIE_YEAR <= release_year <= latest:
        raise ValidationError(
            "release_year", f"Release year must be between {FIRST_MOVIE_YEAR} and {latest}"
        )
    return release_year


def validate_rating(rating: Decimal | int | float | str) -> Decimal:
    if isinstance(rating, bool):
        raise ValidationError("rating", "Rating must be a number")
    try:
        # str() first so 9.3 stays 9.3 instead of its binary float expansion
        value = rating if isinstance(rating, Decimal) else Decimal(str(rating))
    except (InvalidOperation, ValueError):
        raise ValidationError("rating", "Rating must be a number")
    if not value.is_finite() or not RATING_MIN <= value <= RATING_MAX:
        raise ValidationError("rating", f"Rating must be between {RATING_MIN} and {RATING_MAX}")
    # Column is NUMERIC(4, 2)
    if value != value.quantize(RATING_STEP):
        raise ValidationError("rating", "Rating cannot have more than 2 decimal places")
    return value


def format_rating(rating: Decimal) -> str:
    """Plain decimal text without trailing zeros: 9.30 -> "9.3", 10.00 -> "10"."""
    return format(rating.normalize(), "f")
