import logging

from userservice.application.validators import validate_required
from userservice.domain.ports.repositories.users import UserRepository
from userservice.domain.schemas.user import UserCreate

logger = logging.getLogger(__name__)


async def user_create(user_data: UserCreate, user_repository: UserRepository) -> int:
    """Creates a new user.

    The payload is validated first, so nothing is written when a required
    field is empty.

    Args:
        user_data: The data for the new user.
        user_repository: The repository to store the user data.

    Returns:
        The ID generated for the new user.

    Raises:
        UserValidationError: If a required field is empty.
    """
    validate_required(user_data)

    user_id = await user_repository.create(user_data)

    logger.info("User %s created", user_id)
    return user_id
