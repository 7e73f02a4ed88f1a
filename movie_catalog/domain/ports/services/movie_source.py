from abc import ABC, abstractmethod
from typing import Optional

from movie_catalog.domain.models.external_movie import DetailResponse, SearchResponse


class MovieSourcePort(ABC):
    """Read-only access to a third-party movie metadata API.

    Implementations absorb transport and decoding failures of a single call and
    return ``None`` for it, so callers treat a failed call as "no data".
    """

    @abstractmethod
    async def search(self, term: str, page: int) -> Optional[SearchResponse]:
        pass

    @abstractmethod
    async def get_details(self, external_id: str) -> Optional[DetailResponse]:
        pass
