from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from movie_catalog.domain.models.external_movie import DetailResponse, SearchResponse
from movie_catalog.domain.ports.services.movie_source import MovieSourcePort
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class OmdbMovieSource(MovieSourcePort):
    """OMDb-compatible HTTP client.

    A single call never raises for transport errors, non-2xx statuses, empty
    bodies or undecodable payloads; it logs and returns ``None`` instead.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url
        self.api_key = api_key
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "OmdbMovieSource":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def search(self, term: str, page: int) -> Optional[SearchResponse]:
        params = {"s": term, "type": "movie", "page": page, "apikey": self.api_key}
        return await self._fetch(params, SearchResponse, f"search '{term}' page {page}")

    async def get_details(self, external_id: str) -> Optional[DetailResponse]:
        params = {"i": external_id, "apikey": self.api_key}
        return await self._fetch(params, DetailResponse, f"details for {external_id}")

    async def _fetch(self, params: Dict[str, Any], model: Type[ResponseT], what: str) -> Optional[ResponseT]:
        try:
            response = await self._client.get(self.base_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"OMDb responded with HTTP {e.response.status_code} for {what}")
            return None
        except httpx.HTTPError as e:
            logger.warning(f"Failed to contact OMDb for {what}: {e}")
            return None

        payload = response.text
        if not payload or not payload.strip():
            logger.debug(f"Empty OMDb response for {what}")
            return None

        try:
            return model.model_validate_json(payload)
        except ValidationError as e:
            logger.warning(f"Could not decode OMDb response for {what}: {e.error_count()} error(s)")
            return None
