from typing import Optional

from pydantic import BaseModel

DIRECTOR_UNKNOWN = "Diretor desconhecido"
YEAR_NOT_INFORMED = "Não informado"

# Largest value a signed 64-bit integer column can hold.
MAX_MOVIE_ID = 2**63 - 1


class Movie(BaseModel):
    title: str
    director: str = DIRECTOR_UNKNOWN
    release_year: str = YEAR_NOT_INFORMED
    id: Optional[int] = None
