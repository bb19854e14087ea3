"""Movies router: owner-scoped CRUD, search and stats."""
from typing import Annotated

from fastapi import APIRouter, Query, Response, status

from movievault.application.catalog.commands import CreateMovie, DeleteMovie, UpdateMovie
from movievault.application.catalog.queries import (
    GetMovieById,
    GetMovieStats,
    ListMovies,
    SearchMovies,
    movie_not_found,
)
from movievault.interfaces.api.v1.outcomes import unwrap
from movievault.interfaces.api.v1.schemas.movie import (
    MovieCreate,
    MovieReplace,
    MovieResponse,
    MovieStatsResponse,
    MovieUpdate,
)
from movievault.interfaces.dependencies import CurrentUserId, Facade

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=list[MovieResponse])
async def list_movies(facade: Facade, current_user_id: CurrentUserId):
    movies = unwrap(await facade.list_movies(ListMovies(caller_id=current_user_id)))
    return [MovieResponse.model_validate(m) for m in movies]


@router.get("/search", response_model=list[MovieResponse])
async def search_movies(
    facade: Facade,
    current_user_id: CurrentUserId,
    keyword: Annotated[str, Query()] = "",
):
    movies = unwrap(await facade.search_movies(SearchMovies(caller_id=current_user_id, keyword=keyword)))
    return [MovieResponse.model_validate(m) for m in movies]


@router.get("/stats", response_model=MovieStatsResponse)
async def movie_stats(facade: Facade, current_user_id: CurrentUserId):
    stats = unwrap(await facade.get_movie_stats(GetMovieStats(caller_id=current_user_id)))
    return MovieStatsResponse.model_validate(stats)


@router.get("/{movie_id}", response_model=MovieResponse)
async def get_movie(movie_id: int, facade: Facade, current_user_id: CurrentUserId):
    movie = unwrap(
        await facade.get_movie(GetMovieById(movie_id=movie_id, caller_id=current_user_id)),
        forbidden_as=movie_not_found(movie_id),
    )
    return MovieResponse.model_validate(movie)


@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
async def create_movie(body: MovieCreate, facade: Facade, current_user_id: CurrentUserId):
    movie = unwrap(await facade.create_movie(CreateMovie(owner_id=current_user_id, **body.model_dump())))
    return MovieResponse.model_validate(movie)


@router.put("/{movie_id}", response_model=MovieResponse)
async def replace_movie(
    movie_id: int, body: MovieReplace, facade: Facade, current_user_id: CurrentUserId
):
    movie = unwrap(await facade.update_movie(
        UpdateMovie(movie_id=movie_id, caller_id=current_user_id, **body.model_dump())
    ))
    return MovieResponse.model_validate(movie)


@router.patch("/{movie_id}", response_model=MovieResponse)
async def update_movie(
    movie_id: int, body: MovieUpdate, facade: Facade, current_user_id: CurrentUserId
):
    movie = unwrap(await facade.update_movie(
        UpdateMovie(movie_id=movie_id, caller_id=current_user_id, **body.model_dump(exclude_none=True))
    ))
    return MovieResponse.model_validate(movie)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie(movie_id: int, facade: Facade, current_user_id: CurrentUserId):
    unwrap(await facade.delete_movie(DeleteMovie(movie_id=movie_id, caller_id=current_user_id)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
