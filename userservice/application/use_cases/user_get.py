from userservice.domain.entities.user import User
from userservice.domain.ports.repositories.users import UserRepository


async def user_get(user_id: int, user_repository: UserRepository) -> User:
    """Retrieves a single user.

    Raises:
        UserNotFound: If no user matches the ID.
    """
    return await user_repository.get_by_id(user_id)
