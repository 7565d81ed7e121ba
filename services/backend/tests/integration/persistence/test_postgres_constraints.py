"""Constraint classification against a real PostgreSQL server."""

import pytest

from postboard.domain.post import Post
from postboard.domain.shared import PersistenceError, PersistenceErrorKind
from postboard.domain.user import User
from postboard.infrastructure.persistence.sqlalchemy.repositories import (
    PostRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    db_session,
    postgres_container,
)

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_duplicate_email_is_unique_violation(db_session):
    """PostgreSQL reports a duplicate email as SQLSTATE 23505."""
    repo = UserRepositorySQLAlchemy(db_session)
    await repo.add(User.create("a@x.com", "A", "hash"))
    await db_session.commit()

    with pytest.raises(PersistenceError) as exc_info:
        await repo.add(User.create("a@x.com", "B", "hash"))

    assert exc_info.value.kind == PersistenceErrorKind.UNIQUE_VIOLATION


@pytest.mark.asyncio
async def test_unknown_author_is_foreign_key_violation(db_session):
    """PostgreSQL reports a missing author as SQLSTATE 23503."""
    repo = PostRepositorySQLAlchemy(db_session)

    with pytest.raises(PersistenceError) as exc_info:
        await repo.add(Post.create(title="Orphan", author_id=404))

    assert exc_info.value.kind == PersistenceErrorKind.FOREIGN_KEY_VIOLATION


@pytest.mark.asyncio
async def test_deleting_author_cascades_to_posts(db_session):
    """Posts are removed together with their author."""
    users = UserRepositorySQLAlchemy(db_session)
    posts = PostRepositorySQLAlchemy(db_session)
    author = await users.add(User.create("a@x.com", "A", "hash"))
    await posts.add(Post.create(title="Mine", author_id=author.id))
    await db_session.commit()

    await users.delete(author.id)
    await db_session.commit()

    assert await posts.count() == 0
