"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from postboard.application.dtos import UserDTO
from postboard.application.services.error_translation import (
    translate_persistence_error,
)
from postboard.domain.shared import PersistenceError
from postboard.domain.user import EmailAlreadyExistsError, User, UserNotFoundError
from postboard_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)

if TYPE_CHECKING:
    from postboard.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates postboard_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - User registration
    - Login with password
    - Token verification

    Each call is independent; the service holds no state between requests.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def register(
        self,
        email: str,
        name: str,
        password: str,
    ) -> UserDTO:
        password_hash = self._password_service.hash(password)
        user = User.create(email, name, password_hash)

        # Uniqueness is left to the database so two concurrent
        # registrations of one email cannot both succeed.
        try:
            user = await self._user_repo.add(user)
        except PersistenceError as e:
            raise translate_persistence_error(
                e,
                on_unique_violation=lambda: EmailAlreadyExistsError(user.email),
            ) from e

        logger.info("User registered: %s (id: %s)", user.email, user.id)
        return UserDTO.from_user(user)

    async def login(self, email: str, password: str) -> str:
        try:
            user = await self._user_repo.find_by_email(email)
        except PersistenceError as e:
            raise translate_persistence_error(e) from e

        if user is None:
            raise UserNotFoundError

        if not self._password_service.verify(password, user.password_hash):
            logger.info("Failed login for user id %s", user.id)
            raise InvalidCredentialsError

        if self._password_service.needs_rehash(user.password_hash):
            await self._rehash_password(user, password)

        token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            name=user.name,
        )

        logger.info("User logged in: %s", user.email)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)

    async def _rehash_password(self, user: User, password: str) -> None:
        """Store a new digest made with the current work factor."""
        user.change_password_hash(self._password_service.hash(password))
        try:
            await self._user_repo.update(user)
        except PersistenceError as e:
            raise translate_persistence_error(
                e,
                on_not_found=lambda: UserNotFoundError(user.id),
            ) from e
        logger.info("Password re-hashed for user id %s", user.id)
