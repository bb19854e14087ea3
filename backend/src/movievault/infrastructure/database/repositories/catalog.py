"""Concrete SQLAlchemy repository implementations for the catalog context."""
from dataclasses import replace

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from movievault.domain.catalog.entities import Movie
from movievault.infrastructure.database.models.catalog import MovieModel


class MovieRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._s = session

    async def get_by_id(self, movie_id: int) -> Movie | None:
        row = await self._s.get(MovieModel, movie_id)
        return _to_movie(row) if row else None

    async def list_by_owner(self, owner_id: int) -> list[Movie]:
        stmt = select(MovieModel).where(MovieModel.owner_id == owner_id).order_by(MovieModel.id)
        rows = (await self._s.execute(stmt)).scalars().all()
        return [_to_movie(r) for r in rows]

    async def add(self, movie: Movie) -> Movie:
        model = MovieModel(
            owner_id=movie.owner_id,
            title=movie.title,
            director=movie.director,
            genre=movie.genre,
            release_year=movie.release_year,
            rating=movie.rating,
            created_at=movie.created_at,
        )
        self._s.add(model)
        await self._s.flush()
        return replace(movie, id=model.id)

    async def save(self, movie: Movie) -> Movie:
        model = await self._s.get(MovieModel, movie.id)
        if model is None:
            raise LookupError(f"Movie {movie.id} is not stored")
        model.title = movie.title
        model.director = movie.director
        model.genre = movie.genre
        model.release_year = movie.release_year
        model.rating = movie.rating
        await self._s.flush()
        return movie

    async def remove(self, movie_id: int) -> bool:
        # Single statement: of two concurrent deletes only one sees a row count
        stmt = (
            delete(MovieModel)
            .where(MovieModel.id == movie_id)
            .execution_options(synchronize_session="fetch")
        )
        result = await self._s.execute(stmt)
        return result.rowcount > 0

    async def commit(self) -> None:
        await self._s.commit()


# ── Mappers ───────────────────────────────────────────────────────────────────

def _to_movie(m: MovieModel) -> Movie:
    return Movie(
        id=m.id,
        owner_id=m.owner_id,
        title=m.title,
        director=m.director,
        genre=m.genre,
        release_year=m.release_year,
        rating=m.rating,
        created_at=m.created_at,
    )
