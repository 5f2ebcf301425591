import re
from collections.abc import AsyncGenerator
from typing import Final

from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query
from fastapi import Response
from fastapi import status

from sqlalchemy.ext.asyncio import AsyncSession

from userservice.domain.ports.repositories.users import UserRepository
from userservice.infrastructure.adapters.database.repositories.users import UserSQLRepository
from userservice.infrastructure.adapters.database.session import session_scope
from userservice.infrastructure.config.settings.app import app_settings

USER_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")


async def get_db() -> AsyncGenerator[AsyncSession]:  # pragma: no cover
    async with session_scope() as session:
        yield session


def get_user_repository(session: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserSQLRepository(session)


def get_user_id(user_id: str | None = Query(default=None, alias="id")) -> int:
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing 'id' query parameter")

    # ASCII digits with an optional minus sign.
    if not USER_ID_PATTERN.fullmatch(user_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid 'id' query parameter")

    return int(user_id)


def set_read_headers(response: Response) -> None:
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Server"] = app_settings.SERVER_NAME
