"""Fixtures for repository tests on an in-memory SQLite database."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from postboard.infrastructure.persistence.sqlalchemy.engine import create_engine
from postboard.infrastructure.persistence.sqlalchemy.models import Base
from postboard.infrastructure.persistence.sqlalchemy.repositories import (
    PostRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)


@pytest.fixture
async def engine():
    """Create an in-memory SQLite engine with foreign keys enforced."""
    engine = create_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    """Session factory bound to the test engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_maker):
    """Create an in-memory SQLite session for testing."""
    async with session_maker() as session:
        yield session


@pytest.fixture
def user_repo(session):
    """Create UserRepository instance."""
    return UserRepositorySQLAlchemy(session)


@pytest.fixture
def post_repo(session):
    """Create PostRepository instance."""
    return PostRepositorySQLAlchemy(session)
