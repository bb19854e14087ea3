"""Repository contracts for the Catalog bounded context."""
from typing import Protocol

from .entities import Movie


class IMovieRepository(Protocol):
    async def get_by_id(self, movie_id: int) -> Movie | None: ...

    async def list_by_owner(self, owner_id: int) -> list[Movie]:
        """Movies owned by ``owner_id`` ordered by id. Never returns other owners' rows."""
        ...

    async def add(self, movie: Movie) -> Movie:
        """Insert ``movie`` and return a copy carrying the assigned id."""
        ...

    async def save(self, movie: Movie) -> Movie: ...

    async def remove(self, movie_id: int) -> bool:
        """Delete the row; ``False`` when nothing was deleted."""
        ...

    async def commit(self) -> None: ...
