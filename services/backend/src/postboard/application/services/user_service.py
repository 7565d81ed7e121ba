"""Service for reading, updating, and deleting user accounts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from postboard.application.dtos import UserDTO
from postboard.application.services.error_translation import (
    translate_persistence_error,
)
from postboard.domain.shared import PersistenceError
from postboard.domain.user import EmailAlreadyExistsError, UserNotFoundError
from postboard_auth import PasswordHashingService

if TYPE_CHECKING:
    from postboard.domain.user import User, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Account maintenance: find-then-mutate over the user repository."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def get_user(self, user_id: int) -> UserDTO:
        user = await self._load(user_id)
        return UserDTO.from_user(user)

    async def update_user(
        self,
        user_id: int,
        email: Optional[str] = None,
        name: Optional[str] = None,
        password: Optional[str] = None,
    ) -> UserDTO:
        user = await self._load(user_id)

        if email is not None:
            user.change_email(email)
        if name is not None:
            user.rename(name)
        if password is not None:
            user.change_password_hash(self._password_service.hash(password))

        try:
            user = await self._user_repo.update(user)
        except PersistenceError as e:
            raise translate_persistence_error(
                e,
                on_unique_violation=lambda: EmailAlreadyExistsError(user.email),
                on_not_found=lambda: UserNotFoundError(user_id),
            ) from e

        logger.info("User updated: %s", user_id)
        return UserDTO.from_user(user)

    async def delete_user(self, user_id: int) -> str:
        await self._load(user_id)

        try:
            await self._user_repo.delete(user_id)
        except PersistenceError as e:
            raise translate_persistence_error(
                e,
                on_not_found=lambda: UserNotFoundError(user_id),
            ) from e

        logger.info("User deleted: %s", user_id)
        return f"User with id {user_id} deleted"

    async def _load(self, user_id: int) -> User:
        try:
            return await self._user_repo.get_by_id(user_id)
        except PersistenceError as e:
            raise translate_persistence_error(
                e,
                on_not_found=lambda: UserNotFoundError(user_id),
            ) from e
