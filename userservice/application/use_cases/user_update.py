import logging

from userservice.application.validators import validate_required
from userservice.domain.exceptions import UserNotFound
from userservice.domain.ports.repositories.users import UserRepository
from userservice.domain.schemas.user import UserUpdate

logger = logging.getLogger(__name__)


async def user_update(user_data: UserUpdate, user_repository: UserRepository) -> None:
    """Replaces the text fields of an existing user.

    Args:
        user_data: The new values, including the ID of the user to update.
        user_repository: The repository for user data.

    Raises:
        UserValidationError: If a required field is empty.
        UserNotFound: If no user matches the ID.
    """
    validate_required(user_data)

    affected = await user_repository.update(user_data.id, user_data)
    if not affected:
        raise UserNotFound(f"User {user_data.id} not found")

    logger.info("User %s updated", user_data.id)
