"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from postboard.infrastructure.persistence.sqlalchemy.engine import create_engine
from postboard.infrastructure.persistence.sqlalchemy.models import Base
from postboard.presentation.api.app import API_V1_PREFIX, create_app
from postboard.presentation.api.dependencies import get_db_session
from postboard_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only-0123456789"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def jwt_secret() -> str:
    """Secret the test application signs tokens with."""
    return TEST_JWT_SECRET


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        # Required security settings
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        postgres_password=SecretStr("test-password"),
        database_url_override="sqlite+aiosqlite:///:memory:",
        # API settings
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_hash_rounds=4,  # Low rounds for fast tests
    )


@pytest.fixture
async def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def app(api_settings, test_db_engine):
    """Create the application with its sessions bound to the test database."""
    app = create_app(settings=api_settings)

    # Create a session maker that uses our test engine
    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    return app


@pytest.fixture
def test_client(app) -> TestClient:
    """Create a test client with an in-memory database."""
    return TestClient(app)


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "email": "a@x.com",
        "name": "A",
        "password": "pw123456",
    }


@pytest.fixture
def registered_user(test_client, registered_user_data, api_v1_prefix) -> dict:
    """Register the test user and return the response body."""
    response = test_client.post(
        f"{api_v1_prefix}/users/register", json=registered_user_data
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(
    test_client, registered_user, registered_user_data, api_v1_prefix
) -> dict:
    """Get auth headers for a registered user."""
    response = test_client.post(
        f"{api_v1_prefix}/users/login",
        json={
            "email": registered_user_data["email"],
            "password": registered_user_data["password"],
        },
    )
    assert response.status_code == 200

    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
