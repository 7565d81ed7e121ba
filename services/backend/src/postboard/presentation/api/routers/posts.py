"""Post router: CRUD with offset pagination."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query, status

from postboard.presentation.api.dependencies import CurrentUser, DBSession, Posts
from postboard.presentation.api.schemas import (
    CreatePostRequest,
    ErrorResponse,
    MessageResponse,
    PostListResponse,
    PostResponse,
    UpdatePostRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Post not found"}}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
    responses={
        401: {"description": "Missing, invalid, or expired token"},
        404: {"model": ErrorResponse, "description": "Author not found"},
    },
)
async def create_post(
    request: CreatePostRequest,
    current_user: CurrentUser,
    posts: Posts,
    session: DBSession,
) -> PostResponse:
    """Create a post owned by the authenticated user."""
    post = await posts.create_post(
        author_id=current_user.user_id,
        title=request.title,
        content=request.content,
        published=request.published,
    )
    await session.commit()
    return PostResponse.model_validate(post)


@router.get("", summary="List posts")
async def list_posts(
    posts: Posts,
    page: Annotated[int | None, Query(description="Page number (1-based)")] = None,
    size: Annotated[int | None, Query(description="Posts per page")] = None,
) -> PostListResponse:
    """
    List posts ordered by id.

    Missing, zero, or negative ``page``/``size`` fall back to page 1 and the
    default page size.
    """
    result = await posts.list_posts(page=page, size=size)
    return PostListResponse.model_validate(result)


@router.get("/{post_id}", summary="Get a post", responses=NOT_FOUND_RESPONSE)
async def get_post(post_id: int, posts: Posts) -> PostResponse:
    post = await posts.get_post(post_id)
    return PostResponse.model_validate(post)


@router.patch("/{post_id}", summary="Update a post", responses=NOT_FOUND_RESPONSE)
async def update_post(
    post_id: int,
    request: UpdatePostRequest,
    _: CurrentUser,
    posts: Posts,
    session: DBSession,
) -> PostResponse:
    post = await posts.update_post(
        post_id,
        title=request.title,
        content=request.content,
        published=request.published,
    )
    await session.commit()
    return PostResponse.model_validate(post)


@router.delete("/{post_id}", summary="Delete a post", responses=NOT_FOUND_RESPONSE)
async def delete_post(
    post_id: int,
    _: CurrentUser,
    posts: Posts,
    session: DBSession,
) -> MessageResponse:
    message = await posts.delete_post(post_id)
    await session.commit()
    return MessageResponse(message=message)
