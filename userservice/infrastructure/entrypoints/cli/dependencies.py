from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.ext.asyncio import AsyncSession

from userservice.domain.ports.repositories.users import UserRepository
from userservice.infrastructure.adapters.database.repositories.users import UserSQLRepository
from userservice.infrastructure.adapters.database.session import async_engine
from userservice.infrastructure.adapters.database.session import session_scope


@asynccontextmanager
async def get_db() -> AsyncGenerator[AsyncSession]:
    async with session_scope() as session:
        yield session


def get_engine() -> AsyncEngine:
    return async_engine


def get_user_repository(session: AsyncSession) -> UserRepository:
    return UserSQLRepository(session)
