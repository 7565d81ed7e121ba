"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from postboard.domain.user.aggregates.user import User
from postboard.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Every method reports failures as ``PersistenceError``.
    """

    @abstractmethod
    async def add(self, user: User) -> User:
        """
        Insert a new user.

        Parameters
        ----------
        user
            The user to insert (``id`` is None)

        Returns
        -------
        The stored user, with its database-assigned id

        Raises
        ------
        PersistenceError
            UNIQUE_VIOLATION if the email is already in use
        """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User:
        """
        Load a user by id.

        Raises
        ------
        PersistenceError
            NOT_FOUND if no user has this id
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address.

        Parameters
        ----------
        email
            The user's email address (string or Email value object)

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Write all fields of an existing user.

        Raises
        ------
        PersistenceError
            NOT_FOUND if the row no longer exists,
            UNIQUE_VIOLATION if the new email is taken
        """

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """
        Delete a user by id. Their posts are removed by cascade.

        Raises
        ------
        PersistenceError
            NOT_FOUND if the row no longer exists
        """
