"""User router: registration, login, profile, update, and deletion."""

import logging

from fastapi import APIRouter, status

from postboard.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    DBSession,
    JWTServiceDep,
    Users,
)
from postboard.presentation.api.schemas import (
    ErrorResponse,
    LoginRequest,
    MeResponse,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
    UpdateUserRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Password too weak"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    """Create an account. The response never contains the password."""
    user = await auth_service.register(
        email=request.email,
        name=request.name,
        password=request.password,
    )
    await session.commit()
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    jwt_service: JWTServiceDep,
    session: DBSession,
) -> TokenResponse:
    """
    Authenticate with email and password.

    Returns a signed bearer token carrying the user's id, email, and name.
    A stored digest made with an outdated work factor is replaced.
    """
    access_token = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    await session.commit()
    return TokenResponse(
        access_token=access_token,
        expires_in=int(jwt_service.access_token_lifetime.total_seconds()),
    )


@router.get(
    "/me",
    summary="Get the authenticated identity",
    responses={401: {"description": "Missing, invalid, or expired token"}},
)
async def me(current_user: CurrentUser) -> MeResponse:
    """Return the identity claims of the bearer token."""
    return MeResponse(**current_user.to_claims())


@router.patch(
    "/{user_id}",
    summary="Update a user",
    responses={
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    _: CurrentUser,
    users: Users,
    session: DBSession,
) -> UserResponse:
    """Change any of email, name, or password. A new password is re-hashed."""
    user = await users.update_user(
        user_id,
        email=request.email,
        name=request.name,
        password=request.password,
    )
    await session.commit()
    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    summary="Delete a user",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def delete_user(
    user_id: int,
    _: CurrentUser,
    users: Users,
    session: DBSession,
) -> MessageResponse:
    """Delete a user and, by cascade, their posts."""
    message = await users.delete_user(user_id)
    await session.commit()
    return MessageResponse(message=message)
