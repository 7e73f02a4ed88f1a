from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from movie_catalog.domain.exceptions import RepositoryError
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)

from .conftest import BaseIntegrationTest
from .factories import movie_factory


class TestSQLAlchemyMovieRepository(BaseIntegrationTest):
    """Integration tests for SQLAlchemy movie repository"""

    @pytest.fixture
    def movie_repository(self, test_session):
        return SQLAlchemyMovieRepository(test_session)

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, movie_repository):
        created = await movie_repository.create(movie_factory.create_domain_movie())

        assert created.id is not None
        assert created.title == "Blade Runner"
        assert created.director == "Ridley Scott"
        assert created.release_year == "1982"

    @pytest.mark.asyncio
    async def test_get_by_id_uses_value_equality(self, movie_repository):
        created = await movie_repository.create(movie_factory.create_domain_movie())

        found = await movie_repository.get_by_id(int(str(created.id)))

        assert found == created

    @pytest.mark.asyncio
    async def test_movie_not_found(self, movie_repository):
        assert await movie_repository.get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_create_many_and_count(self, movie_repository):
        movies = [movie_factory.create_domain_movie(title=f"Movie {i}") for i in range(5)]

        created = await movie_repository.create_many(movies)

        assert await movie_repository.count() == 5
        ids = [movie.id for movie in created]
        assert None not in ids
        assert len(set(ids)) == 5

    @pytest.mark.asyncio
    async def test_get_all_pages_and_sorts(self, movie_repository):
        for title in ["Cria Cuervos", "Amarcord", "Brazil", "Delicatessen"]:
            await movie_repository.create(movie_factory.create_domain_movie(title=title))

        first_page = await movie_repository.get_all(offset=0, limit=2, sort_by="title")
        second_page = await movie_repository.get_all(offset=2, limit=2, sort_by="title")
        descending = await movie_repository.get_all(limit=1, sort_by="title", descending=True)
        by_id = await movie_repository.get_all()

        assert [m.title for m in first_page] == ["Amarcord", "Brazil"]
        assert [m.title for m in second_page] == ["Cria Cuervos", "Delicatessen"]
        assert [m.title for m in descending] == ["Delicatessen"]
        assert [m.title for m in by_id] == ["Cria Cuervos", "Amarcord", "Brazil", "Delicatessen"]

    @pytest.mark.asyncio
    async def test_get_all_rejects_unknown_sort_field(self, movie_repository):
        with pytest.raises(ValueError):
            await movie_repository.get_all(sort_by="budget")

    @pytest.mark.asyncio
    async def test_update_movie(self, movie_repository):
        created = await movie_repository.create(movie_factory.create_domain_movie())
        created.title = "Blade Runner: The Final Cut"
        created.release_year = "2007"

        updated = await movie_repository.update(created)

        assert updated.id == created.id
        assert updated.title == "Blade Runner: The Final Cut"
        assert (await movie_repository.get_by_id(created.id)).release_year == "2007"

    @pytest.mark.asyncio
    async def test_update_missing_movie_returns_none(self, movie_repository):
        result = await movie_repository.update(movie_factory.create_domain_movie(id=404))

        assert result is None
        assert await movie_repository.count() == 0

    @pytest.mark.asyncio
    async def test_delete_movie(self, movie_repository):
        created = await movie_repository.create(movie_factory.create_domain_movie())

        assert await movie_repository.delete(created.id) is True
        assert await movie_repository.get_by_id(created.id) is None
        assert await movie_repository.delete(created.id) is False

    @pytest.mark.asyncio
    async def test_commit_failure_is_wrapped(self, movie_repository, test_session, monkeypatch):
        monkeypatch.setattr(test_session, "commit", AsyncMock(side_effect=OperationalError("INSERT", {}, Exception())))

        with pytest.raises(RepositoryError):
            await movie_repository.create_many([movie_factory.create_domain_movie()])
