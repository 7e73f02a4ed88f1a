import re
from typing import Optional

from movie_catalog.domain.models.movie import DIRECTOR_UNKNOWN, YEAR_NOT_INFORMED

YEAR_PATTERN = re.compile(r"(\d{4})")
UNKNOWN_YEAR_KEY = "?"
NOT_AVAILABLE = "N/A"


def extract_year(raw_year: Optional[str]) -> Optional[str]:
    """Return the first 4-digit sequence of ``raw_year`` ("2001–2003" -> "2001")."""
    if raw_year is None:
        return None
    match = YEAR_PATTERN.search(raw_year)
    return match.group(1) if match else None


def normalize_year(raw_year: Optional[str]) -> str:
    return extract_year(raw_year) or YEAR_NOT_INFORMED


def normalize_director(raw_director: Optional[str]) -> str:
    if raw_director is None:
        return DIRECTOR_UNKNOWN
    director = raw_director.strip()
    if not director or director.upper() == NOT_AVAILABLE:
        return DIRECTOR_UNKNOWN
    return director


def dedup_key(title: str, raw_year: Optional[str]) -> str:
    return f"{title.strip().lower()}|{extract_year(raw_year) or UNKNOWN_YEAR_KEY}"
