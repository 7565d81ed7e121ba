from postboard.presentation.api.schemas.common import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from postboard.presentation.api.schemas.posts import (
    CreatePostRequest,
    PaginationMeta,
    PostListResponse,
    PostResponse,
    UpdatePostRequest,
)
from postboard.presentation.api.schemas.users import (
    LoginRequest,
    MeResponse,
    RegisterRequest,
    TokenResponse,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "CreatePostRequest",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MeResponse",
    "MessageResponse",
    "PaginationMeta",
    "PostListResponse",
    "PostResponse",
    "RegisterRequest",
    "TokenResponse",
    "UpdatePostRequest",
    "UpdateUserRequest",
    "UserResponse",
]
