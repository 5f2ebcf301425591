from collections.abc import Iterator
from contextlib import contextmanager
from typing import Final

from sqlalchemy import delete
from sqlalchemy import insert
from sqlalchemy import select
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from userservice.domain.entities.user import User
from userservice.domain.exceptions import StorageError
from userservice.domain.exceptions import UserNotFound
from userservice.domain.ports.repositories.users import UserRepository
from userservice.domain.schemas.user import REQUIRED_FIELDS
from userservice.domain.schemas.user import UserCreate
from userservice.infrastructure.adapters.database.models import User as UserModel

# Range of the INTEGER primary key: no row can match an id outside of it.
ID_RANGE: Final[range] = range(-(2**31), 2**31)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raises driver and SQLAlchemy failures as `StorageError`."""
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        raise StorageError(f"Unable to {operation}") from e


class UserSQLRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_list(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.id)

        with storage_errors("list users"):
            result = await self.session.execute(stmt)
            return [user_db.to_entity() for user_db in result.scalars().all()]

    async def get_by_id(self, user_id: int) -> User:
        if user_id not in ID_RANGE:
            raise UserNotFound(f"User {user_id} not found")

        stmt = select(UserModel).where(UserModel.id == user_id)

        with storage_errors(f"get user {user_id}"):
            result = await self.session.execute(stmt)
            user_db = result.scalar_one_or_none()

        if user_db is None:
            raise UserNotFound(f"User {user_id} not found")

        return user_db.to_entity()

    async def create(self, user_data: UserCreate) -> int:
        stmt = insert(UserModel).values(**user_data.model_dump(include=set(REQUIRED_FIELDS))).returning(UserModel.id)

        with storage_errors("create user"):
            result = await self.session.execute(stmt)
            user_id = result.scalar_one()
            await self.session.commit()

        return user_id

    async def update(self, user_id: int, user_data: UserCreate) -> int:
        if user_id not in ID_RANGE:
            return 0

        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(**user_data.model_dump(include=set(REQUIRED_FIELDS)))
        )

        with storage_errors(f"update user {user_id}"):
            result = await self.session.execute(stmt)
            await self.session.commit()

        return int(result.rowcount)  # type: ignore

    async def delete(self, user_id: int) -> int:
        if user_id not in ID_RANGE:
            return 0

        stmt = delete(UserModel).where(UserModel.id == user_id)

        with storage_errors(f"delete user {user_id}"):
            result = await self.session.execute(stmt)
            await self.session.commit()

        return int(result.rowcount)  # type: ignore
