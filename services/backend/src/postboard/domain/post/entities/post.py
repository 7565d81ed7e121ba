from datetime import datetime
from typing import Optional

from postboard.domain.shared.exceptions import ValidationError
from postboard.domain.shared.time import utc_now

MAX_TITLE_LENGTH = 255


def _clean_title(title: str) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        msg = "Title cannot be empty"
        raise ValidationError(msg)
    if len(cleaned) > MAX_TITLE_LENGTH:
        msg = f"Title cannot exceed {MAX_TITLE_LENGTH} characters"
        raise ValidationError(msg)
    return cleaned


class Post:
    """A blog post owned by a user."""

    def __init__(  # NOQA: PLR0913
        self,
        title: str,
        author_id: int,
        content: Optional[str] = None,
        published: bool = False,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._title = _clean_title(title)
        self._content = content
        self._published = published
        self._author_id = author_id
        self._id = id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def content(self) -> Optional[str]:
        return self._content

    @property
    def published(self) -> bool:
        return self._published

    @property
    def author_id(self) -> int:
        return self._author_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def apply_changes(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
        published: Optional[bool] = None,
    ) -> None:
        # Only provided (non-None) values are changed
        if title is not None:
            self._title = _clean_title(title)
        if content is not None:
            self._content = content
        if published is not None:
            self._published = published
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        title: str,
        author_id: int,
        content: Optional[str] = None,
        published: bool = False,
    ) -> "Post":
        return cls(
            title=title,
            author_id=author_id,
            content=content,
            published=published,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Post):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"Post(id={self._id}, title={self._title!r}, author_id={self._author_id})"
