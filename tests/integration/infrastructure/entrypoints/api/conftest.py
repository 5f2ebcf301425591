from collections.abc import AsyncGenerator
from collections.abc import Iterator
from unittest import mock

from httpx import ASGITransport
from httpx import AsyncClient

from sqlalchemy.ext.asyncio import AsyncSession

import pytest

from userservice.infrastructure.entrypoints.api.dependencies import get_db
from userservice.infrastructure.entrypoints.api.main import app


@pytest.fixture(name="mock_api_logger")
def block_api_logging_reconfiguration() -> Iterator[mock.Mock]:
    """Prevents FastAPI lifespan from overwriting test logging config."""
    with mock.patch("userservice.infrastructure.entrypoints.api.main.configure_loggers") as patched:
        yield patched


@pytest.fixture
async def async_client(mock_api_logger: mock.Mock, async_session_db: AsyncSession) -> AsyncGenerator[AsyncClient]:
    """AsyncClient on the app, every request sharing the rolled-back test session."""

    async def override_get_db():
        yield async_session_db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    # Clean up
    app.dependency_overrides.clear()
