from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class DeleteMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int) -> bool:
        """Return ``False`` when there is no movie with ``movie_id``."""
        existing_movie = await self.movie_repository.get_by_id(movie_id)
        if not existing_movie:
            return False

        return await self.movie_repository.delete(movie_id)
