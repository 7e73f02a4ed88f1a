from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from movie_catalog.app import app
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.infrastructure.persistence.database import get_session
from movie_catalog.infrastructure.persistence.models import table_registry


class BaseIntegrationTest:
    """Base class for integration tests with common setup"""

    @pytest_asyncio.fixture
    async def db_engine(self, tmp_path):
        """Create test database engine backed by a throwaway SQLite file"""
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'filmes.db'}")

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, db_engine):
        """Create test database session"""
        async with AsyncSession(db_engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def client(self, test_session):
        """Create test HTTP client with database override"""

        async def override_get_session():
            yield test_session

        app.dependency_overrides[get_session] = override_get_session

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()


# Shared fixtures for use case testing
@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for use case testing"""
    return AsyncMock(spec=MovieRepository)


class RecordingLogger(LoggerPort):
    """Logger port that keeps (level, formatted message) pairs for assertions"""

    def __init__(self):
        self.records = []

    def _record(self, level: str, msg: str, *args) -> None:
        self.records.append((level, msg % args if args else msg))

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._record("debug", msg, *args)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._record("info", msg, *args)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._record("warning", msg, *args)

    def exception(self, msg: str, *args, **kwargs) -> None:
        self._record("exception", msg, *args)

    def messages(self, level: str) -> list:
        return [message for recorded_level, message in self.records if recorded_level == level]


@pytest.fixture
def recording_logger():
    return RecordingLogger()
