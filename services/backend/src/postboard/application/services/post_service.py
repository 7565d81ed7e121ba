"""Service for creating, listing, updating, and deleting posts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from postboard.application.dtos import PageMeta, PageRequest, PostDTO, PostPageDTO
from postboard.application.dtos.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from postboard.application.services.error_translation import (
    translate_persistence_error,
)
from postboard.domain.post import AuthorNotFoundError, Post, PostNotFoundError
from postboard.domain.shared import ConflictError, PersistenceError

if TYPE_CHECKING:
    from postboard.domain.post import PostRepository

logger = logging.getLogger(__name__)


class PostService:
    """CRUD over posts with offset pagination."""

    def __init__(
        self,
        post_repository: PostRepository,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ):
        self._post_repo = post_repository
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    async def create_post(
        self,
        author_id: int,
        title: str,
        content: Optional[str] = None,
        published: bool = False,
    ) -> PostDTO:
        post = Post.create(
            title=title,
            author_id=author_id,
            content=content,
            published=published,
        )

        try:
            post = await self._post_repo.add(post)
        except PersistenceError as e:
            raise translate_persistence_error(
                e,
                on_unique_violation=ConflictError,
                on_foreign_key_violation=lambda: AuthorNotFoundError(author_id),
            ) from e

        logger.info("Post created: %s (author: %s)", post.id, author_id)
        return PostDTO.from_post(post)

    async def list_posts(
        self,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> PostPageDTO:
        request = PageRequest.resolve(
            page,
            size,
            default_size=self._default_page_size,
            max_size=self._max_page_size,
        )

        try:
            posts = await self._post_repo.find_page(request.offset, request.limit)
            total = await self._post_repo.count()
        except PersistenceError as e:
            raise translate_persistence_error(e) from e

        return PostPageDTO(
            data=[PostDTO.from_post(post) for post in posts],
            meta=PageMeta.build(total, request),
        )

    async def get_post(self, post_id: int) -> PostDTO:
        post = await self._load(post_id)
        return PostDTO.from_post(post)

    async def update_post(
        self,
        post_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
        published: Optional[bool] = None,
    ) -> PostDTO:
        post = await self._load(post_id)
        post.apply_changes(title=title, content=content, published=published)

        try:
            post = await self._post_repo.update(post)
        except PersistenceError as e:
            raise translate_persistence_error(
                e,
                on_unique_violation=ConflictError,
                on_not_found=lambda: PostNotFoundError(post_id),
            ) from e

        logger.info("Post updated: %s", post_id)
        return PostDTO.from_post(post)

    async def delete_post(self, post_id: int) -> str:
        await self._load(post_id)

        try:
            await self._post_repo.delete(post_id)
        except PersistenceError as e:
            raise translate_persistence_error(
                e,
                on_not_found=lambda: PostNotFoundError(post_id),
            ) from e

        logger.info("Post deleted: %s", post_id)
        return f"Post with id {post_id} deleted"

    async def _load(self, post_id: int) -> Post:
        try:
            return await self._post_repo.get_by_id(post_id)
        except PersistenceError as e:
            raise translate_persistence_error(
                e,
                on_not_found=lambda: PostNotFoundError(post_id),
            ) from e
