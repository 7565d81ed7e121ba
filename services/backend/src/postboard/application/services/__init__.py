"""Application layer services."""

from postboard.application.services.authentication_service import (
    AuthenticationService,
)
from postboard.application.services.error_translation import (
    translate_persistence_error,
)
from postboard.application.services.post_service import PostService
from postboard.application.services.user_service import UserService

__all__ = [
    "AuthenticationService",
    "PostService",
    "UserService",
    "translate_persistence_error",
]
