from datetime import datetime, timezone
from decimal import Decimal

import pytest

from movievault.domain.catalog.entities import Movie, format_rating
from movievault.domain.clock import FixedClock
from movievault.domain.errors import ValidationError

from conftest import NOW, make_movie


def test_create_keeps_fields_unchanged() -> None:
    movie = make_movie(owner_id=7, title="Heat", director="Michael Mann", genre="Crime",
                       release_year=1995, rating=Decimal("8.3"))

    assert movie.id is None
    assert (movie.owner_id, movie.title, movie.director, movie.genre) == (7, "Heat", "Michael Mann", "Crime")
    assert movie.release_year == 1995
    assert movie.rating == Decimal("8.3")


def test_float_rating_is_taken_at_face_value() -> None:
    assert make_movie(rating=9.3).rating == Decimal("9.3")


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("title", "x" * 201),
        ("title", "   "),
        ("director", ""),
        ("director", "d" * 101),
        ("genre", "g" * 51),
        ("release_year", 1887),
        ("release_year", NOW.year + 6),
        ("rating", Decimal("-0.1")),
        ("rating", Decimal("10.01")),
        ("rating", "NaN"),
        ("rating", Decimal("9.999")),
        ("rating", 0.001),
    ],
)
def test_create_rejects_out_of_range_fields(field: str, value) -> None:
    with pytest.raises(ValidationError) as excinfo:
        make_movie(**{field: value})
    assert excinfo.value.field == field


def test_boundaries_are_inclusive() -> None:
    movie = make_movie(title="t" * 200, director="d" * 100, genre="g" * 50,
                       release_year=1888, rating=0)
    assert movie.rating == Decimal("0")

    latest = make_movie(release_year=NOW.year + 5, rating=10)
    assert latest.release_year == 2031


def test_rating_allows_two_decimal_places() -> None:
    assert make_movie(rating=Decimal("8.75")).rating == Decimal("8.75")
    assert make_movie(rating="9.300").rating == Decimal("9.3")

    movie = make_movie(rating=Decimal("9.3"))
    with pytest.raises(ValidationError) as excinfo:
        movie.update_rating("9.305")
    assert excinfo.value.field == "rating"
    assert movie.rating == Decimal("9.3")


def test_year_bound_follows_the_clock() -> None:
    later = FixedClock(datetime(2030, 1, 1, tzinfo=timezone.utc))

    with pytest.raises(ValidationError):
        Movie.create(owner_id=1, title="Soon", director="D", genre="G", release_year=2033,
                     rating=5, clock=FixedClock(NOW))
    assert Movie.create(owner_id=1, title="Soon", director="D", genre="G", release_year=2033,
                        rating=5, clock=later).release_year == 2033


def test_mutators_revalidate() -> None:
    movie = make_movie()

    with pytest.raises(ValidationError) as excinfo:
        movie.update_title("")
    assert excinfo.value.field == "title"
    assert movie.title == "The Shawshank Redemption"

    movie.update_rating("7.5")
    movie.update_genre("Prison drama")
    assert movie.rating == Decimal("7.5")
    assert movie.genre == "Prison drama"


def test_matches_any_field_case_insensitively() -> None:
    movie = make_movie(title="The Dark Knight", director="Christopher Nolan", genre="Action",
                       release_year=2008, rating=Decimal("9.00"))

    assert movie.matches("dark")
    assert movie.matches("NOLAN")
    assert movie.matches("2008")
    assert movie.matches("9")
    assert not movie.matches("drama")


def test_format_rating_drops_trailing_zeros() -> None:
    assert format_rating(Decimal("9.30")) == "9.3"
    assert format_rating(Decimal("10.00")) == "10"
    assert format_rating(Decimal("0.00")) == "0"
