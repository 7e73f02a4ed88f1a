from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response

from movie_catalog.applications.interfaces.dtos.filter_page import FilterPage
from movie_catalog.applications.interfaces.dtos.movie import (
    MoviePage,
    MoviePublic,
    MovieSchema,
)
from movie_catalog.applications.use_cases.movie.create_movie import CreateMovieUseCase
from movie_catalog.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movie import GetMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movies import GetMoviesUseCase
from movie_catalog.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from movie_catalog.domain.models.movie import MAX_MOVIE_ID
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.config.dependencies import get_movie_repository

router = APIRouter(prefix="/filmes", tags=["filmes"])

MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]
MovieId = Annotated[int, Path(ge=1, le=MAX_MOVIE_ID)]


def _not_found(movie_id: int) -> HTTPException:
    return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=f"Movie with id {movie_id} not found")


@router.get("", response_model=MoviePage)
async def read_movies(filter_movies: Annotated[FilterPage, Query()], movie_repository: MovieRepositoryDep):
    use_case = GetMoviesUseCase(movie_repository)
    return await use_case.execute(filter_movies)


@router.get("/{movie_id}", response_model=MoviePublic)
async def read_movie(movie_id: MovieId, movie_repository: MovieRepositoryDep):
    use_case = GetMovieUseCase(movie_repository)
    movie = await use_case.execute(movie_id)
    if movie is None:
        raise _not_found(movie_id)
    return movie


@router.post("", status_code=HTTPStatus.CREATED, response_model=MoviePublic)
async def create_movie(movie: MovieSchema, movie_repository: MovieRepositoryDep):
    use_case = CreateMovieUseCase(movie_repository)
    return await use_case.execute(movie)


@router.put("/{movie_id}", response_model=MoviePublic)
async def update_movie(movie_id: MovieId, movie: MovieSchema, movie_repository: MovieRepositoryDep):
    use_case = UpdateMovieUseCase(movie_repository)
    updated = await use_case.execute(movie_id, movie)
    if updated is None:
        raise _not_found(movie_id)
    return updated


@router.delete("/{movie_id}", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
async def delete_movie(movie_id: MovieId, movie_repository: MovieRepositoryDep):
    use_case = DeleteMovieUseCase(movie_repository)
    if not await use_case.execute(movie_id):
        raise _not_found(movie_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
