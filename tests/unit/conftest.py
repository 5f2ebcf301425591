from unittest import mock

import pytest

from userservice.domain.entities.user import User
from userservice.domain.ports.repositories.users import UserRepository
from userservice.domain.schemas.user import UserCreate

from tests.unit.factories.entities.user import UserFactory
from tests.unit.factories.schemas.user import UserCreateFactory

# --- Repository Mocks ---


@pytest.fixture
def mock_user_repository() -> mock.AsyncMock:
    return mock.AsyncMock(spec=UserRepository)


# --- Entity Mocks ---


@pytest.fixture
def user(request: pytest.FixtureRequest) -> User:
    return UserFactory.build(**getattr(request, "param", {}))


@pytest.fixture
def user_create(request: pytest.FixtureRequest) -> UserCreate:
    return UserCreateFactory.build(**getattr(request, "param", {}))
