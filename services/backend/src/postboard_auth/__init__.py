"""Postboard Auth - Generic authentication infrastructure.

This package provides authentication building blocks that are independent
of the blog domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification

Architecture:
    postboard_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from postboard_auth import PasswordHashingService, JWTService
"""

from postboard_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    MalformedPasswordHashError,
    WeakPasswordError,
)
from postboard_auth.schemas import TokenPayload
from postboard_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
    "MalformedPasswordHashError",
]
