"""SQLAlchemy implementation of PostRepository."""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.domain.post import Post, PostRepository
from postboard.domain.shared import PersistenceError
from postboard.domain.shared.time import ensure_tz_aware
from postboard.infrastructure.persistence.sqlalchemy.errors import persistence_errors
from postboard.infrastructure.persistence.sqlalchemy.models import PostModel

logger = logging.getLogger(__name__)

ENTITY = "Post"


class PostRepositorySQLAlchemy(PostRepository):
    """SQLAlchemy implementation of the PostRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, post: Post) -> Post:
        model = PostModel(
            title=post.title,
            content=post.content,
            published=post.published,
            author_id=post.author_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
        with persistence_errors(ENTITY):
            self._session.add(model)
            await self._session.flush()

        logger.debug("Created post: %s", model.id)
        return self._map_to_domain(model)

    async def get_by_id(self, post_id: int) -> Post:
        stmt = select(PostModel).where(PostModel.id == post_id)
        with persistence_errors(ENTITY):
            result = await self._session.execute(stmt)
            model = result.scalar_one()

        return self._map_to_domain(model)

    async def find_page(self, offset: int, limit: int) -> list[Post]:
        stmt = select(PostModel).order_by(PostModel.id).offset(offset).limit(limit)
        with persistence_errors(ENTITY):
            result = await self._session.execute(stmt)
            models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(PostModel)
        with persistence_errors(ENTITY):
            result = await self._session.execute(stmt)
            return result.scalar_one()

    async def update(self, post: Post) -> Post:
        with persistence_errors(ENTITY):
            model = await self._find_model_by_id(post.id)
            if model is None:
                raise PersistenceError.not_found(ENTITY, post.id)

            model.title = post.title
            model.content = post.content
            model.published = post.published
            model.updated_at = post.updated_at
            await self._session.flush()

        logger.debug("Updated post: %s", post.id)
        return self._map_to_domain(model)

    async def delete(self, post_id: int) -> None:
        with persistence_errors(ENTITY):
            model = await self._find_model_by_id(post_id)
            if model is None:
                raise PersistenceError.not_found(ENTITY, post_id)

            await self._session.delete(model)
            await self._session.flush()

        logger.debug("Deleted post: %s", post_id)

    async def _find_model_by_id(self, post_id: Optional[int]) -> Optional[PostModel]:
        stmt = select(PostModel).where(PostModel.id == post_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: PostModel) -> Post:
        return Post(
            id=model.id,
            title=model.title,
            content=model.content,
            published=model.published,
            author_id=model.author_id,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
