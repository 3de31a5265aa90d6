"""Integration tests for the webinar repositories.

Tests cover:
- Repository contract, run against both adapters (SQLAlchemy and in-memory)
- Entity ↔ Model mapping (timezone-aware dates survive a round trip)
- Database constraints surfacing as StorageError

Architecture:
- SQLAlchemy adapter runs on an in-process SQLite database (aiosqlite)
- Uses test_database fixture (fresh schema per test)
- Each repository call in its own session, as in a request
"""

from contextlib import asynccontextmanager
from datetime import UTC, datetime

import pytest
import pytest_asyncio

from webinar_planner.domain.errors import StorageError
from webinar_planner.infrastructure.persistence.repositories import (
    InMemoryWebinarRepository,
    WebinarRepository,
)
from tests.utils.doubles import make_webinar


# =============================================================================
# Fixtures
# =============================================================================


@pytest_asyncio.fixture(params=["sql", "memory"])
async def repo_scope(request, test_database):
    """Factory of repository scopes, one per simulated request."""
    if request.param == "memory":
        memory_repo = InMemoryWebinarRepository()

        @asynccontextmanager
        async def scope():
            yield memory_repo

    else:

        @asynccontextmanager
        async def scope():
            async with test_database.get_session() as session:
                yield WebinarRepository(session=session)

    return scope


# =============================================================================
# Contract Tests
# =============================================================================


@pytest.mark.integration
class TestWebinarRepositoryContract:
    """Behavior shared by every WebinarRepository implementation."""

    @pytest.mark.asyncio
    async def test_create_then_find(self, repo_scope):
        webinar = make_webinar(id="w-1")

        async with repo_scope() as repo:
            await repo.create(webinar)

        async with repo_scope() as repo:
            found = await repo.find_by_id("w-1")

        assert found == webinar

    @pytest.mark.asyncio
    async def test_find_unknown_returns_none(self, repo_scope):
        async with repo_scope() as repo:
            assert await repo.find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_create_duplicate_raises_storage_error(self, repo_scope):
        async with repo_scope() as repo:
            await repo.create(make_webinar(id="w-1", title="First"))

        with pytest.raises(StorageError) as exc_info:
            async with repo_scope() as repo:
                await repo.create(make_webinar(id="w-1", title="Second"))

        assert exc_info.value.webinar_id == "w-1"
        async with repo_scope() as repo:
            found = await repo.find_by_id("w-1")
        assert found is not None
        assert found.title == "First"

    @pytest.mark.asyncio
    async def test_update_overwrites_seats(self, repo_scope):
        async with repo_scope() as repo:
            await repo.create(make_webinar(id="w-1", seats=100))

        async with repo_scope() as repo:
            webinar = await repo.find_by_id("w-1")
            assert webinar is not None
            webinar.update_seats(200)
            await repo.update(webinar)

        async with repo_scope() as repo:
            found = await repo.find_by_id("w-1")
        assert found is not None
        assert found.seats == 200

    @pytest.mark.asyncio
    async def test_update_unknown_raises_storage_error(self, repo_scope):
        with pytest.raises(StorageError) as exc_info:
            async with repo_scope() as repo:
                await repo.update(make_webinar(id="ghost"))

        assert exc_info.value.webinar_id == "ghost"

    @pytest.mark.asyncio
    async def test_reads_own_writes_in_one_scope(self, repo_scope):
        async with repo_scope() as repo:
            await repo.create(make_webinar(id="w-1", seats=100))
            webinar = await repo.find_by_id("w-1")
            assert webinar is not None
            webinar.update_seats(300)
            await repo.update(webinar)

            found = await repo.find_by_id("w-1")

        assert found is not None
        assert found.seats == 300


# =============================================================================
# SQLAlchemy Adapter
# =============================================================================


@pytest.mark.integration
class TestSqlWebinarRepository:
    """Mapping and constraint behavior of the SQLAlchemy adapter."""

    @pytest.mark.asyncio
    async def test_dates_come_back_timezone_aware(self, test_database):
        start = datetime(2026, 5, 1, 9, 30, tzinfo=UTC)
        end = datetime(2026, 5, 1, 10, 30, tzinfo=UTC)

        async with test_database.get_session() as session:
            await WebinarRepository(session=session).create(
                make_webinar(id="w-1", start_date=start, end_date=end)
            )

        async with test_database.get_session() as session:
            found = await WebinarRepository(session=session).find_by_id("w-1")

        assert found is not None
        assert found.start_date == start
        assert found.start_date.tzinfo is not None
        assert found.end_date == end

    @pytest.mark.asyncio
    async def test_seat_range_enforced_by_database(self, test_database):
        with pytest.raises(StorageError):
            async with test_database.get_session() as session:
                await WebinarRepository(session=session).create(
                    make_webinar(id="w-1", seats=0)
                )

        async with test_database.get_session() as session:
            assert await WebinarRepository(session=session).find_by_id("w-1") is None

    @pytest.mark.asyncio
    async def test_check_connection(self, test_database):
        assert await test_database.check_connection() is True
