"""DTOs for posts and paginated post listings."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from postboard.application.dtos.pagination import PageMeta
from postboard.domain.post import Post


@dataclass(frozen=True)
class PostDTO:
    """A post as returned to callers."""

    id: int
    title: str
    content: Optional[str]
    published: bool
    author_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostDTO":
        if post.id is None:
            msg = "Cannot build a view of an unsaved post"
            raise ValueError(msg)
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            published=post.published,
            author_id=post.author_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


@dataclass(frozen=True)
class PostPageDTO:
    """One page of posts together with its pagination metadata."""

    data: list[PostDTO]
    meta: PageMeta
