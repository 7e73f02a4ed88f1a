from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _ExternalRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SearchCandidate(_ExternalRecord):
    title: Optional[str] = Field(default=None, alias="Title")
    year: Optional[str] = Field(default=None, alias="Year")
    imdb_id: Optional[str] = Field(default=None, alias="imdbID")
    type: Optional[str] = Field(default=None, alias="Type")


class SearchResponse(_ExternalRecord):
    """One page of search results as returned by an OMDb-compatible API."""

    search: Optional[List[Optional[SearchCandidate]]] = Field(default=None, alias="Search")
    total_results: Optional[str] = Field(default=None, alias="totalResults")
    response: Optional[str] = Field(default=None, alias="Response")
    error: Optional[str] = Field(default=None, alias="Error")

    @property
    def is_successful(self) -> bool:
        return (self.response or "").lower() == "true"


class DetailResponse(_ExternalRecord):
    title: Optional[str] = Field(default=None, alias="Title")
    year: Optional[str] = Field(default=None, alias="Year")
    director: Optional[str] = Field(default=None, alias="Director")
    response: Optional[str] = Field(default=None, alias="Response")

    @property
    def is_successful(self) -> bool:
        return (self.response or "").lower() == "true"
