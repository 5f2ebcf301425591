from userservice.domain.entities.user import User
from userservice.domain.ports.repositories.users import UserRepository


async def user_list(user_repository: UserRepository) -> list[User]:
    return await user_repository.get_list()
