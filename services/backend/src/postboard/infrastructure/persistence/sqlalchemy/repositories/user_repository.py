"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional, Union

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.domain.shared import PersistenceError
from postboard.domain.shared.time import ensure_tz_aware
from postboard.domain.user import Email, User, UserRepository
from postboard.infrastructure.persistence.sqlalchemy.errors import persistence_errors
from postboard.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

ENTITY = "User"


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, user: User) -> User:
        model = UserModel(
            email=user.email,
            name=user.name,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        with persistence_errors(ENTITY):
            self._session.add(model)
            await self._session.flush()

        logger.debug("Created user: %s", model.id)
        return self._map_to_domain(model)

    async def get_by_id(self, user_id: int) -> User:
        stmt = select(UserModel).where(UserModel.id == user_id)
        with persistence_errors(ENTITY):
            result = await self._session.execute(stmt)
            model = result.scalar_one()

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        # Normalize email for lookup
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        with persistence_errors(ENTITY):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def update(self, user: User) -> User:
        with persistence_errors(ENTITY):
            model = await self._find_model_by_id(user.id)
            if model is None:
                raise PersistenceError.not_found(ENTITY, user.id)

            model.email = user.email
            model.name = user.name
            model.password_hash = user.password_hash
            model.updated_at = user.updated_at
            await self._session.flush()

        logger.debug("Updated user: %s", user.id)
        return self._map_to_domain(model)

    async def delete(self, user_id: int) -> None:
        with persistence_errors(ENTITY):
            model = await self._find_model_by_id(user_id)
            if model is None:
                raise PersistenceError.not_found(ENTITY, user_id)

            await self._session.delete(model)
            await self._session.flush()

        logger.debug("Deleted user: %s", user_id)

    async def _find_model_by_id(self, user_id: Optional[int]) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            name=model.name,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
