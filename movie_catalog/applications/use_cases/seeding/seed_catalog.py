from typing import List, Optional, Set

from movie_catalog.applications.interfaces.dtos.seed import SeedResult, SeedStatus
from movie_catalog.domain.exceptions import RepositoryError
from movie_catalog.domain.models.external_movie import SearchCandidate, SearchResponse
from movie_catalog.domain.models.movie import DIRECTOR_UNKNOWN, Movie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.movie_source import MovieSourcePort
from movie_catalog.domain.services.call_budget import CallBudget
from movie_catalog.domain.services.movie_normalizer import dedup_key, normalize_director, normalize_year

SEARCH_TERMS = (
    "a", "e", "i", "o", "u",
    "man", "woman", "star", "love", "dark",
    "night", "day", "war", "world", "king",
    "girl", "boy", "dead", "life", "time",
)
MAX_PAGES_PER_TERM = 10
# The search endpoint returns at most this many items per page.
PAGE_SIZE = 10


class SeedCatalogUseCase:
    """Fill the catalog from an external movie source up to ``target_total`` records.

    The run is idempotent: it only fetches the records that are missing. Every
    external call (search page or detail lookup) consumes one unit of a shared
    call budget. Failures of individual calls are absorbed by the source and
    treated as "no data"; a failure outside a single call aborts the run
    without saving anything.
    """

    def __init__(
        self,
        movie_repository: MovieRepository,
        movie_source: MovieSourcePort,
        logger: LoggerPort,
        api_key: Optional[str],
        target_total: int = 1000,
        max_api_calls: int = 1000,
        search_terms: tuple = SEARCH_TERMS,
    ):
        self.movie_repository = movie_repository
        self.movie_source = movie_source
        self.logger = logger
        self.api_key = api_key
        self.target_total = target_total
        self.max_api_calls = max_api_calls
        self.search_terms = search_terms

    async def execute(self) -> SeedResult:
        existing = await self.movie_repository.count()
        missing = self.target_total - existing
        if missing <= 0:
            self.logger.debug("Catalog already holds %d movies. No import needed.", existing)
            return SeedResult(status=SeedStatus.ALREADY_COMPLETE)

        if not self.api_key or not self.api_key.strip():
            self.logger.info("External movie API key not configured. Skipping catalog seeding.")
            return SeedResult(status=SeedStatus.DISABLED, missing=missing)

        budget = CallBudget(self.max_api_calls, self.logger)
        try:
            movies = await self._collect(missing, budget)
            if not movies:
                self.logger.warning("No valid movies found while seeding the catalog.")
                return self._result(SeedStatus.NO_CANDIDATES, missing, budget)

            await self.movie_repository.create_many(movies)
            self.logger.info(
                "Imported %d movies from the external API. Current total: %d",
                len(movies),
                existing + len(movies),
            )
            if budget.exhausted:
                self.logger.warning("Limit of %d external API calls reached during import.", self.max_api_calls)
            return self._result(SeedStatus.IMPORTED, missing, budget, imported=len(movies))
        except (RepositoryError, OSError) as e:
            self.logger.exception("Failed to seed the catalog from the external API: %s", e)
            return self._result(SeedStatus.FAILED, missing, budget)

    async def _collect(self, missing: int, budget: CallBudget) -> List[Movie]:
        accumulated: List[Movie] = []
        seen: Set[str] = set()

        for term in self.search_terms:
            if len(accumulated) >= missing or budget.exhausted:
                break

            for page in range(1, MAX_PAGES_PER_TERM + 1):
                if len(accumulated) >= missing or budget.exhausted:
                    break

                response = await self._search_page(term, page, budget)
                if response is None or not response.is_successful or response.search is None:
                    break

                for candidate in response.search:
                    if len(accumulated) >= missing or budget.exhausted:
                        break
                    if candidate is None or candidate.title is None or not candidate.title.strip():
                        continue

                    key = dedup_key(candidate.title, candidate.year)
                    if key in seen:
                        continue
                    seen.add(key)

                    accumulated.append(await self._to_movie(candidate, budget))

                if len(response.search) < PAGE_SIZE:
                    break

        return accumulated[:missing]

    async def _search_page(self, term: str, page: int, budget: CallBudget) -> Optional[SearchResponse]:
        if not budget.try_consume():
            return None
        response = await self.movie_source.search(term, page)
        if response is None:
            self.logger.debug("No data for term '%s' page %d.", term, page)
        return response

    async def _to_movie(self, candidate: SearchCandidate, budget: CallBudget) -> Movie:
        return Movie(
            title=candidate.title.strip(),
            director=await self._resolve_director(candidate.imdb_id, budget),
            release_year=normalize_year(candidate.year),
        )

    async def _resolve_director(self, external_id: Optional[str], budget: CallBudget) -> str:
        if not external_id or not external_id.strip():
            return DIRECTOR_UNKNOWN
        if not budget.try_consume():
            return DIRECTOR_UNKNOWN

        detail = await self.movie_source.get_details(external_id.strip())
        if detail is None or not detail.is_successful:
            return DIRECTOR_UNKNOWN
        return normalize_director(detail.director)

    @staticmethod
    def _result(status: SeedStatus, missing: int, budget: CallBudget, imported: int = 0) -> SeedResult:
        return SeedResult(
            status=status,
            missing=missing,
            imported=imported,
            api_calls=budget.used,
            budget_exhausted=budget.exhausted,
        )
