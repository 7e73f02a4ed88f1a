from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.applications.use_cases.seeding.seed_catalog import SeedCatalogUseCase
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.movie_source import MovieSourcePort
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from movie_catalog.infrastructure.adapters.services.omdb_movie_source import OmdbMovieSource
from movie_catalog.infrastructure.config.settings import OmdbSettings, SeedSettings
from movie_catalog.infrastructure.persistence.database import get_session


def get_omdb_settings() -> OmdbSettings:
    return OmdbSettings()


def get_seed_settings() -> SeedSettings:
    return SeedSettings()


def get_movie_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> MovieRepository:
    return SQLAlchemyMovieRepository(session)


def build_movie_source(omdb_settings: OmdbSettings) -> OmdbMovieSource:
    return OmdbMovieSource(
        base_url=omdb_settings.api_url,
        api_key=omdb_settings.api_key,
        timeout=omdb_settings.timeout,
    )


def build_seed_catalog_use_case(
    movie_repository: MovieRepository,
    movie_source: MovieSourcePort,
    omdb_settings: OmdbSettings,
    seed_settings: SeedSettings,
    logger: LoggerPort,
) -> SeedCatalogUseCase:
    return SeedCatalogUseCase(
        movie_repository=movie_repository,
        movie_source=movie_source,
        logger=logger,
        api_key=omdb_settings.api_key,
        target_total=seed_settings.target_total,
        max_api_calls=seed_settings.max_api_calls,
    )
