import math

from movie_catalog.applications.interfaces.dtos.filter_page import FilterPage
from movie_catalog.applications.interfaces.dtos.movie import MoviePage, MoviePublic
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class GetMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, filter_page: FilterPage) -> MoviePage:
        sort_by, descending = filter_page.sort_order()
        movies = await self.movie_repository.get_all(
            offset=filter_page.offset,
            limit=filter_page.limit,
            sort_by=sort_by,
            descending=descending,
        )
        total = await self.movie_repository.count()

        return MoviePage(
            content=[MoviePublic.model_validate(movie) for movie in movies if movie.id is not None],
            page=filter_page.page,
            size=filter_page.size,
            total_elements=total,
            total_pages=math.ceil(total / filter_page.size),
        )
