"""Pytest configuration.

Settings are loaded at import time, so the test environment is set up here
before any application module is imported:
- ENVIRONMENT=testing (JSON logs)
- DATABASE_URL points at an in-process SQLite database (aiosqlite)
"""

import inspect
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through FastAPI TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh database with the schema created.

    Each test gets its own in-memory SQLite database; tables are created
    before the test and dropped after it.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                repo = WebinarRepository(session=session)
    """
    from webinar_planner.core.config import settings
    from webinar_planner.infrastructure.persistence.database import Database

    db = Database(database_url=settings.database_url, echo=settings.db_echo)
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


# =============================================================================
# Reusable Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Usage:
        def test_something(mock_logger):
            handler = ChangeSeatsHandler(webinar_repo=repo, logger=mock_logger)
            ...
            mock_logger.info.assert_called_once()
    """
    from unittest.mock import Mock

    from webinar_planner.domain.protocols.logger_protocol import LoggerProtocol

    return Mock(spec=LoggerProtocol)
