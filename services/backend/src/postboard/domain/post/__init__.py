"""Post domain - blog posts owned by users."""

from postboard.domain.post.entities import Post
from postboard.domain.post.exceptions import AuthorNotFoundError, PostNotFoundError
from postboard.domain.post.repositories import PostRepository

__all__ = [
    "AuthorNotFoundError",
    "Post",
    "PostNotFoundError",
    "PostRepository",
]
