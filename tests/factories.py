from typing import List, Optional

from movie_catalog.domain.models.external_movie import DetailResponse, SearchCandidate, SearchResponse
from movie_catalog.domain.models.movie import Movie as DomainMovie


class MovieFactory:
    """Factory for creating test movies"""

    def create_domain_movie(
        self,
        *,
        id: Optional[int] = None,
        title: str = "Blade Runner",
        director: str = "Ridley Scott",
        release_year: str = "1982",
    ) -> DomainMovie:
        """Create a domain movie for testing"""
        return DomainMovie(id=id, title=title, director=director, release_year=release_year)

    def create_movie_data(
        self, *, title: str = "Blade Runner", director: str = "Ridley Scott", release_year: str = "1982"
    ) -> dict:
        """Create movie data dictionary for API tests"""
        return {"titulo": title, "diretor": director, "anoLancamento": release_year}


class OmdbFactory:
    """Factory for OMDb-shaped responses"""

    def candidate(
        self, title: Optional[str], year: Optional[str] = "2000", imdb_id: Optional[str] = None
    ) -> SearchCandidate:
        return SearchCandidate(title=title, year=year, imdb_id=imdb_id, type="movie")

    def page(self, candidates: List[SearchCandidate]) -> SearchResponse:
        return SearchResponse(search=candidates, total_results=str(len(candidates)), response="True")

    def full_page(self, prefix: str, year: str = "2000") -> SearchResponse:
        return self.page([self.candidate(f"{prefix} {i}", year, f"tt{prefix}{i}") for i in range(10)])

    def failure(self, error: str = "Movie not found!") -> SearchResponse:
        return SearchResponse(response="False", error=error)

    def detail(self, director: Optional[str]) -> DetailResponse:
        return DetailResponse(director=director, response="True")


# Global factory instances
movie_factory = MovieFactory()
omdb_factory = OmdbFactory()
