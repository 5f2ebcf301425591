import logging

from userservice.domain.ports.repositories.users import UserRepository

logger = logging.getLogger(__name__)


async def user_delete(user_id: int, user_repository: UserRepository) -> None:
    # Deleting a missing user is not an error, so repeated deletes behave alike.
    affected = await user_repository.delete(user_id)
    if affected:
        logger.info("User %s deleted", user_id)
    else:
        logger.debug("No user to delete with ID %s", user_id)
