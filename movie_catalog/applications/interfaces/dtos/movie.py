from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from movie_catalog.domain.models.movie import DIRECTOR_UNKNOWN, YEAR_NOT_INFORMED


class MovieSchema(BaseModel):
    """Create/update body. Wire names are ``titulo``, ``diretor`` and ``anoLancamento``."""

    model_config = ConfigDict(populate_by_name=True)

    # Accepted for compatibility with clients that echo records back; never used.
    id: Optional[int] = None
    title: str = Field(alias="titulo", min_length=1)
    director: str = Field(default=DIRECTOR_UNKNOWN, alias="diretor")
    release_year: str = Field(default=YEAR_NOT_INFORMED, alias="anoLancamento")

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value


class MoviePublic(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str = Field(alias="titulo")
    director: str = Field(alias="diretor")
    release_year: str = Field(alias="anoLancamento")


class MoviePage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: list[MoviePublic]
    page: int = Field(alias="number")
    size: int
    total_elements: int = Field(alias="totalElements")
    total_pages: int = Field(alias="totalPages")
