"""User domain - manages account identity and credentials.

This domain handles:
- User aggregate (email, display name, password hash)
- Email value object (validated, normalized)
- Repository interface (implementation in infrastructure)

Design notes:
- User ids are integers assigned by the database
- Email is unique and stored lower-cased
- The password hash lives on the aggregate but never leaves the
  application layer (see application.dtos.UserDTO)
"""

from postboard.domain.user.aggregates import User
from postboard.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from postboard.domain.user.repositories import UserRepository
from postboard.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
