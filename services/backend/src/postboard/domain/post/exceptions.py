"""Post domain exceptions."""

from postboard.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class PostNotFoundError(EntityNotFoundError):
    """Post not found."""

    def __init__(self, post_id: int) -> None:
        self.post_id = post_id
        super().__init__(
            f"Post with id {post_id} not found",
            code=ErrorCode.POST_NOT_FOUND,
        )


class AuthorNotFoundError(EntityNotFoundError):
    """The user a post should belong to does not exist."""

    def __init__(self, author_id: int | None = None) -> None:
        self.author_id = author_id
        super().__init__(
            "Author not found",
            code=ErrorCode.AUTHOR_NOT_FOUND,
            details={"author_id": author_id} if author_id is not None else None,
        )
