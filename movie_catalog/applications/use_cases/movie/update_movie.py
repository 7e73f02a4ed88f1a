from typing import Optional

from movie_catalog.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class UpdateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int, movie_data: MovieSchema) -> Optional[MoviePublic]:
        existing_movie = await self.movie_repository.get_by_id(movie_id)
        if not existing_movie:
            return None

        updated_movie = Movie(
            id=movie_id,
            title=movie_data.title,
            director=movie_data.director,
            release_year=movie_data.release_year,
        )

        result = await self.movie_repository.update(updated_movie)
        if result is None:
            return None

        return MoviePublic.model_validate(result)
