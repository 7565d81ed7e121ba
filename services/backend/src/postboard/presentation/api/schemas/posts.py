"""Post schemas for request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CreatePostRequest(BaseModel):
    """Request schema for creating a post. The author is the caller."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str | None = None
    published: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Hello",
                "content": "First post",
                "published": True,
            },
        },
    )


class UpdatePostRequest(BaseModel):
    """Partial update of a post. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = None
    published: bool | None = None


class PostResponse(BaseModel):
    """Response schema for a post."""

    id: int
    title: str
    content: str | None
    published: bool
    author_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PaginationMeta(BaseModel):
    """Pagination metadata, serialized in camelCase."""

    total: int
    current_page: int
    total_per_page: int
    last_page: int
    prev_page: int | None
    next_page: int | None

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PostListResponse(BaseModel):
    """One page of posts."""

    data: list[PostResponse]
    meta: PaginationMeta

    model_config = ConfigDict(from_attributes=True)
