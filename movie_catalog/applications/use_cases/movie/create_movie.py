from movie_catalog.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_data: MovieSchema) -> MoviePublic:
        # identity is always assigned by the store
        movie = Movie(
            title=movie_data.title,
            director=movie_data.director,
            release_year=movie_data.release_year,
        )

        created_movie = await self.movie_repository.create(movie)

        if created_movie.id is None:
            raise RuntimeError("Movie creation failed - no ID assigned")

        logger.info(f"Movie created: {created_movie.id} - {created_movie.title}")

        return MoviePublic.model_validate(created_movie)
