from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import status

from userservice.application.use_cases.user_create import user_create
from userservice.application.use_cases.user_delete import user_delete
from userservice.application.use_cases.user_get import user_get
from userservice.application.use_cases.user_list import user_list
from userservice.application.use_cases.user_update import user_update
from userservice.domain.exceptions import UserNotFound
from userservice.domain.exceptions import UserValidationError
from userservice.domain.ports.repositories.users import UserRepository
from userservice.domain.schemas.user import UserCreate
from userservice.domain.schemas.user import UserUpdate
from userservice.infrastructure.entrypoints.api.dependencies import get_user_id
from userservice.infrastructure.entrypoints.api.dependencies import get_user_repository
from userservice.infrastructure.entrypoints.api.dependencies import set_read_headers
from userservice.infrastructure.entrypoints.api.schemas import SuccessResponse
from userservice.infrastructure.entrypoints.api.schemas import UserCreatedResponse
from userservice.infrastructure.entrypoints.api.schemas import UserResponse

router = APIRouter()


@router.get("/show", name="users_show", dependencies=[Depends(set_read_headers)])
async def users_show(user_repository: UserRepository = Depends(get_user_repository)) -> list[UserResponse]:
    users = await user_list(user_repository)
    return [UserResponse.model_validate(user) for user in users]


@router.get("", name="user_show", dependencies=[Depends(set_read_headers)])
async def user_show(
    user_id: int = Depends(get_user_id),
    user_repository: UserRepository = Depends(get_user_repository),
) -> UserResponse:
    try:
        user = await user_get(user_id, user_repository)
    except UserNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from e

    return UserResponse.model_validate(user)


@router.post("/create", name="user_create")
async def create(
    user_data: UserCreate,
    user_repository: UserRepository = Depends(get_user_repository),
) -> UserCreatedResponse:
    try:
        user_id = await user_create(user_data, user_repository)
    except UserValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return UserCreatedResponse(id=user_id)


@router.post("/update", name="user_update")
async def update(
    user_data: UserUpdate,
    user_repository: UserRepository = Depends(get_user_repository),
) -> SuccessResponse:
    try:
        await user_update(user_data, user_repository)
    except UserValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except UserNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from e

    return SuccessResponse(message="User updated")


@router.get("/delete", name="user_delete")
async def delete(
    user_id: int = Depends(get_user_id),
    user_repository: UserRepository = Depends(get_user_repository),
) -> SuccessResponse:
    await user_delete(user_id, user_repository)
    return SuccessResponse(message="User deleted")
