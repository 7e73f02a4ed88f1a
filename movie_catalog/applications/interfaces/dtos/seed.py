from enum import Enum

from pydantic import BaseModel


class SeedStatus(str, Enum):
    ALREADY_COMPLETE = "already_complete"
    DISABLED = "disabled"
    NO_CANDIDATES = "no_candidates"
    IMPORTED = "imported"
    FAILED = "failed"


class SeedResult(BaseModel):
    """Summary of one catalog seeding run"""

    status: SeedStatus
    missing: int = 0
    imported: int = 0
    api_calls: int = 0
    budget_exhausted: bool = False
