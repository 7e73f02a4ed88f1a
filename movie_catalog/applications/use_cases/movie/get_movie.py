from typing import Optional

from movie_catalog.applications.interfaces.dtos.movie import MoviePublic
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class GetMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int) -> Optional[MoviePublic]:
        movie = await self.movie_repository.get_by_id(movie_id)
        if not movie:
            return None

        return MoviePublic.model_validate(movie)
