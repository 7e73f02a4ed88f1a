from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.exceptions import RepositoryError
from movie_catalog.domain.models.movie import Movie as DomainMovie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.persistence.models import Movie as SQLMovie

SORT_COLUMNS = {
    "id": SQLMovie.id,
    "title": SQLMovie.title,
    "director": SQLMovie.director,
    "release_year": SQLMovie.release_year,
}


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_movie: SQLMovie) -> DomainMovie:
        return DomainMovie(
            id=sql_movie.id,
            title=sql_movie.title,
            director=sql_movie.director,
            release_year=sql_movie.release_year,
        )

    def _to_sql(self, movie: DomainMovie) -> SQLMovie:
        return SQLMovie(
            title=movie.title,
            director=movie.director,
            release_year=movie.release_year,
        )

    async def get_by_id(self, movie_id: int) -> Optional[DomainMovie]:
        movie = await self.session.get(SQLMovie, movie_id)
        return self._to_domain(movie) if movie else None

    async def get_all(
        self, offset: int = 0, limit: int = 100, sort_by: str = "id", descending: bool = False
    ) -> List[DomainMovie]:
        column = SORT_COLUMNS.get(sort_by)
        if column is None:
            raise ValueError(f"Cannot sort movies by '{sort_by}'")
        order = column.desc() if descending else column.asc()

        # id as tie-breaker keeps pages stable when the sort column has duplicates
        query = select(SQLMovie).order_by(order, SQLMovie.id.asc()).offset(offset).limit(limit)
        result = await self.session.execute(query)
        movies = result.scalars().all()
        return [self._to_domain(movie) for movie in movies]

    async def count(self) -> int:
        return await self.session.scalar(select(func.count()).select_from(SQLMovie)) or 0

    async def create(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = self._to_sql(movie)
        self.session.add(sql_movie)
        await self._commit()
        await self.session.refresh(sql_movie)
        return self._to_domain(sql_movie)

    async def create_many(self, movies: Sequence[DomainMovie]) -> List[DomainMovie]:
        sql_movies = [self._to_sql(movie) for movie in movies]
        self.session.add_all(sql_movies)
        await self._commit()
        return [self._to_domain(sql_movie) for sql_movie in sql_movies]

    async def update(self, movie: DomainMovie) -> Optional[DomainMovie]:
        sql_movie = await self.session.get(SQLMovie, movie.id)
        if not sql_movie:
            return None

        sql_movie.title = movie.title
        sql_movie.director = movie.director
        sql_movie.release_year = movie.release_year

        await self._commit()
        await self.session.refresh(sql_movie)
        return self._to_domain(sql_movie)

    async def delete(self, movie_id: int) -> bool:
        movie = await self.session.get(SQLMovie, movie_id)
        if not movie:
            return False

        await self.session.delete(movie)
        await self._commit()
        return True

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"Failed to persist movies: {e}") from e
