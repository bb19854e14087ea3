"""Log collection statistics for one user, looked up by email.

Runs the same list and stats use cases the API serves, outside any request.
"""
import argparse
import asyncio
import logging
import sys

from movievault.application.catalog.queries import GetMovieStats, ListMovies
from movievault.config import Settings, get_settings
from movievault.infrastructure.auth.jwt import TokenService
from movievault.infrastructure.database.connection import (
    build_engine,
    build_session_factory,
    session_scope,
)
from movievault.infrastructure.database.repositories.catalog import MovieRepository
from movievault.infrastructure.database.repositories.identity import UserRepository
from movievault.interfaces.facade import MovieVaultFacade
from movievault.log import configure_logging

logger = logging.getLogger("movievault.report")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Report on a user's movie collection")
    parser.add_argument("email", help="Email address of the collection owner")
    return parser.parse_args(argv)


async def run_report(email: str, settings: Settings) -> int:
    engine = build_engine(settings)
    try:
        async with session_scope(build_session_factory(engine)) as session:
            user_repo = UserRepository(session)
            user = await user_repo.get_by_email(email)
            if user is None:
                logger.error("No user registered with email %s", email)
                return 1

            facade = MovieVaultFacade(
                user_repo=user_repo,
                movie_repo=MovieRepository(session),
                tokens=TokenService.from_settings(settings),
            )
            movies = (await facade.list_movies(ListMovies(caller_id=user.id))).unwrap()
            stats = (await facade.get_movie_stats(GetMovieStats(caller_id=user.id))).unwrap()
    finally:
        await engine.dispose()

    logger.info("Collection of %s: %d movies", user.username, len(movies))
    logger.info(
        "Genres: %d (top: %r x%d) | Directors: %d (top: %r x%d)",
        stats.total_genres, stats.top_genre, stats.top_genre_count,
        stats.total_directors, stats.most_featured_director, stats.most_featured_director_count,
    )
    logger.info(
        "Ratings: avg %s, high %s, low %s",
        stats.average_rating, stats.highest_rating, stats.lowest_rating,
    )
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)
    return asyncio.run(run_report(args.email.strip(), settings))


if __name__ == "__main__":
    sys.exit(main())
