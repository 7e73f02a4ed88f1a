from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from movie_catalog.domain.models.movie import MAX_MOVIE_ID

SORTABLE_FIELDS = ("id", "title", "director", "release_year")
# Record wire names map onto the same columns.
SORT_FIELD_ALIASES = {"titulo": "title", "diretor": "director", "anoLancamento": "release_year"}
SORT_DIRECTIONS = ("asc", "desc")
MAX_PAGE_SIZE = 1000
# Keeps ``page * size`` inside a signed 64-bit OFFSET for every allowed size.
MAX_PAGE = MAX_MOVIE_ID // MAX_PAGE_SIZE


class FilterPage(BaseModel):
    page: int = Field(default=0, ge=0, le=MAX_PAGE, description="Zero-based page index")
    size: int = Field(default=20, gt=0, le=MAX_PAGE_SIZE, description="Maximum number of items per page")
    sort: Optional[str] = Field(default=None, description="Sort as 'field' or 'field,asc|desc'")

    @field_validator("sort")
    @classmethod
    def validate_sort(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        field, _, direction = value.partition(",")
        field, direction = field.strip(), direction.strip().lower() or "asc"
        field = SORT_FIELD_ALIASES.get(field, field)
        if field not in SORTABLE_FIELDS:
            raise ValueError(f"sort field must be one of {', '.join(SORTABLE_FIELDS)}")
        if direction not in SORT_DIRECTIONS:
            raise ValueError("sort direction must be 'asc' or 'desc'")
        return f"{field},{direction}"

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def limit(self) -> int:
        return self.size

    def sort_order(self) -> Tuple[str, bool]:
        """Return ``(field, descending)``; records are ordered by id when no sort is given."""
        if self.sort is None:
            return "id", False
        field, direction = self.sort.split(",")
        return field, direction == "desc"
