from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from movie_catalog.domain.models.movie import Movie


class MovieRepository(ABC):
    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def get_all(
        self, offset: int = 0, limit: int = 100, sort_by: str = "id", descending: bool = False
    ) -> List[Movie]:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def create(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def create_many(self, movies: Sequence[Movie]) -> List[Movie]:
        pass

    @abstractmethod
    async def update(self, movie: Movie) -> Optional[Movie]:
        pass

    @abstractmethod
    async def delete(self, movie_id: int) -> bool:
        pass
