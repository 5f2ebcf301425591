from collections.abc import AsyncGenerator

from sqlalchemy import make_url
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.asyncio import create_async_engine

import pytest

from userservice.domain.entities.user import User
from userservice.domain.ports.repositories.users import UserRepository
from userservice.domain.schemas.user import UserCreate
from userservice.domain.schemas.user import UserUpdate
from userservice.infrastructure.adapters.database.models import Base
from userservice.infrastructure.adapters.database.repositories.users import UserSQLRepository
from userservice.infrastructure.adapters.database.session import async_session_factory
from userservice.infrastructure.config.settings.database import database_settings

from tests.integration.factories.base import BaseModelFactory
from tests.integration.factories.users import UserModelFactory
from tests.unit.factories.schemas.user import UserCreateFactory
from tests.unit.factories.schemas.user import UserUpdateFactory


@pytest.fixture(scope="session")
def test_db_name() -> str:
    if database_settings.URI is None or not database_settings.URI.path:
        pytest.exit("Missing DATABASE_URI env var (or composites)", 1)
    return f"test_{database_settings.URI.path[1:]}"


@pytest.fixture(scope="session")
async def create_test_database(anyio_backend: str, test_db_name: str) -> AsyncGenerator[None]:
    # Establish a connection to the current DB with admin role.
    async_engine_admin: AsyncEngine = create_async_engine(
        url=str(database_settings.URI),
        isolation_level="AUTOCOMMIT",
    )
    # Then drop/create test database
    try:
        async with async_engine_admin.connect() as async_conn:
            await async_conn.execute(text(f"DROP DATABASE IF EXISTS {test_db_name}"))
            await async_conn.execute(text(f"CREATE DATABASE {test_db_name}"))
    except (OSError, SQLAlchemyError) as e:
        await async_engine_admin.dispose()
        pytest.skip(f"PostgreSQL is not reachable: {e}")

    yield

    # Finally drop the test database
    async with async_engine_admin.connect() as async_conn:
        await async_conn.execute(text(f"DROP DATABASE IF EXISTS {test_db_name}"))
    await async_engine_admin.dispose()


@pytest.fixture(scope="session")
async def async_engine(create_test_database: None, test_db_name: str) -> AsyncGenerator[AsyncEngine]:
    url = make_url(str(database_settings.URI)).set(database=test_db_name)
    async_engine = create_async_engine(url=url)

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_engine

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await async_engine.dispose()


@pytest.fixture(scope="function", autouse=True)
async def async_session_db(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """
    Provides an async session wrapped in a transaction that rolls back after the test.

    Data is never permanently written, so every test starts from an empty table.
    """
    async with async_engine.connect() as conn:
        # Begin a non-ORM transaction
        transaction = await conn.begin()

        # Create a session explicitly bound to this connection
        async with async_session_factory(bind=conn) as async_session:
            # Inject session into Polyfactory
            BaseModelFactory.__async_session__ = async_session

            # Monkeypatch commit to flush.
            # When the API or CLI calls 'await session.commit()', the SQL is sent
            # but the outer transaction stays open for the rollback below.
            async_session.commit = async_session.flush  # type: ignore[method-assign]

            yield async_session

        # Rollback the transaction
        await transaction.rollback()


# --- Repository impl ---


@pytest.fixture
def user_repository(async_session_db: AsyncSession) -> UserRepository:
    return UserSQLRepository(async_session_db)


# --- Entity factories ---


@pytest.fixture
def user_create(request: pytest.FixtureRequest) -> UserCreate:
    return UserCreateFactory.build(**getattr(request, "param", {}))


@pytest.fixture
def user_update(request: pytest.FixtureRequest) -> UserUpdate:
    return UserUpdateFactory.build(**getattr(request, "param", {}))


# --- Models DB factories ---


@pytest.fixture
async def user(request: pytest.FixtureRequest) -> User:
    user_db = await UserModelFactory.create_async(**getattr(request, "param", {}))
    return user_db.to_entity()
