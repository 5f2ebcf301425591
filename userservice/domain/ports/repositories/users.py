from abc import ABC
from abc import abstractmethod

from userservice.domain.entities.user import User
from userservice.domain.schemas.user import UserCreate


class UserRepository(ABC):
    """A repository for managing `User` entities.

    This repository is the only owner of persisted users. Every implementation
    must bind values as statement parameters and wrap any persistence failure
    into a `StorageError`.
    """

    @abstractmethod
    async def get_list(self) -> list[User]:
        """Retrieves every user, ordered by ID.

        Returns:
            A fully materialized list of `User` entities, possibly empty.

        Raises:
            StorageError: If the query fails.
        """
        ...

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User:
        """Retrieves a user by their ID.

        Args:
            user_id: The ID of the user to retrieve.

        Returns:
            The matching `User` entity.

        Raises:
            UserNotFound: If no user matches the ID.
            StorageError: If the query fails.
        """
        ...

    @abstractmethod
    async def create(self, user_data: UserCreate) -> int:
        """Creates a new user in the database.

        Args:
            user_data: A schema object containing the user's details.

        Returns:
            The ID generated by the database for the new user.

        Raises:
            StorageError: On constraint violation or connectivity failure.
        """
        ...

    @abstractmethod
    async def update(self, user_id: int, user_data: UserCreate) -> int:
        """Replaces the text fields of an existing user.

        Args:
            user_id: The ID of the user to update.
            user_data: A schema object with the new field values.

        Returns:
            The number of rows affected, 0 when no user matched.

        Raises:
            StorageError: If the statement fails.
        """
        ...

    @abstractmethod
    async def delete(self, user_id: int) -> int:
        """Deletes a user from the database.

        Args:
            user_id: The ID of the user to delete.

        Returns:
            The number of rows affected, 0 when no user matched.

        Raises:
            StorageError: If the statement fails.
        """
        ...
