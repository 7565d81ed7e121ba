"""FastAPI dependency injection for the Postboard API.

Provides dependencies for:
- Database sessions
- Authentication (token payload from the bearer token)
- Service instances

The engine and session maker are created once by ``create_app`` and kept
on ``app.state``; nothing here is a module-level singleton.
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from postboard.application.services import (
    AuthenticationService,
    PostService,
    UserService,
)
from postboard.infrastructure.persistence.sqlalchemy.models import Base
from postboard.infrastructure.persistence.sqlalchemy.repositories import (
    PostRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from postboard.presentation.api.config import get_api_settings
from postboard_auth import (
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)
from postboard_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


def make_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Build the session maker shared by all requests of one application.

    Returns
    -------
    async_sessionmaker configured with the given engine
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the application's
    session maker. Uncommitted work is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Database Schema Management
# -----------------------------------------------------------------------------


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTServiceDep,
    password_service: PasswordServiceDep,
) -> AuthenticationService:
    """Get authentication service (registration, login, token checks)."""
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


async def get_user_service(
    session: DBSession,
    password_service: PasswordServiceDep,
) -> UserService:
    """Get user maintenance service."""
    return UserService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
    )


async def get_post_service(session: DBSession, settings: SettingsDep) -> PostService:
    """Get post service with configured pagination limits."""
    return PostService(
        post_repository=PostRepositorySQLAlchemy(session),
        default_page_size=settings.pagination_default_size,
        max_page_size=settings.pagination_max_size,
    )


# Type aliases for injected services
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]
Users = Annotated[UserService, Depends(get_user_service)]
Posts = Annotated[PostService, Depends(get_post_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    jwt_service: JWTServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> TokenPayload:
    """
    FastAPI dependency to get the authenticated subject from the JWT.

    The signature and expiry check is the only gate: no database lookup
    is made, so a token stays usable until it expires.

    Raises
    ------
    InvalidTokenError
        If the token is missing, invalid or expired (401 INVALID_TOKEN)
    """
    if credentials is None:
        raise InvalidTokenError("Authentication required")

    try:
        return jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise InvalidTokenError("Invalid or expired token") from e


# Type alias for injected current user
CurrentUser = Annotated[TokenPayload, Depends(get_current_user)]
