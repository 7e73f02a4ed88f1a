from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from movie_catalog.applications.interfaces.dtos.seed import SeedResult
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from movie_catalog.infrastructure.config.dependencies import build_movie_source, build_seed_catalog_use_case
from movie_catalog.infrastructure.config.settings import OmdbSettings, SeedSettings
from movie_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


async def run_catalog_seeding(
    engine: AsyncEngine,
    omdb_settings: Optional[OmdbSettings] = None,
    seed_settings: Optional[SeedSettings] = None,
) -> SeedResult:
    """Run one seeding pass with its own session and HTTP client."""
    omdb_settings = omdb_settings or OmdbSettings()
    seed_settings = seed_settings or SeedSettings()

    async with AsyncSession(engine, expire_on_commit=False) as session:
        async with build_movie_source(omdb_settings) as movie_source:
            use_case = build_seed_catalog_use_case(
                movie_repository=SQLAlchemyMovieRepository(session),
                movie_source=movie_source,
                omdb_settings=omdb_settings,
                seed_settings=seed_settings,
                logger=StdLoggerAdapter("movie_catalog.seeding"),
            )
            return await use_case.execute()
