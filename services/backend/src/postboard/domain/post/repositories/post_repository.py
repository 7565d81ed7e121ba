"""Post repository interface."""

from abc import ABC, abstractmethod

from postboard.domain.post.entities.post import Post


class PostRepository(ABC):
    """Repository interface for posts.

    Every method reports failures as ``PersistenceError``.
    """

    @abstractmethod
    async def add(self, post: Post) -> Post:
        """
        Insert a new post.

        Raises
        ------
        PersistenceError
            FOREIGN_KEY_VIOLATION if the author does not exist
        """

    @abstractmethod
    async def get_by_id(self, post_id: int) -> Post:
        """
        Load a post by id.

        Raises
        ------
        PersistenceError
            NOT_FOUND if no post has this id
        """

    @abstractmethod
    async def find_page(self, offset: int, limit: int) -> list[Post]:
        """Return up to ``limit`` posts starting at ``offset``, ordered by id."""

    @abstractmethod
    async def count(self) -> int:
        """Return the total number of posts."""

    @abstractmethod
    async def update(self, post: Post) -> Post:
        """
        Write all fields of an existing post.

        Raises
        ------
        PersistenceError
            NOT_FOUND if the row no longer exists
        """

    @abstractmethod
    async def delete(self, post_id: int) -> None:
        """
        Delete a post by id.

        Raises
        ------
        PersistenceError
            NOT_FOUND if the row no longer exists
        """
