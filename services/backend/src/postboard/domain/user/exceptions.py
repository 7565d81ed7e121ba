"""User domain exceptions."""

from postboard.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when an email address fails format validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str | None = None) -> None:
        self.email = email
        super().__init__(
            "Email already registered",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email} if email else None,
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found.

    Raised with an id for lookups by primary key, and without one when a
    login names an unknown email.
    """

    def __init__(self, user_id: int | None = None) -> None:
        self.user_id = user_id
        message = (
            "User not found"
            if user_id is None
            else f"User with id {user_id} not found"
        )
        super().__init__(message, code=ErrorCode.USER_NOT_FOUND)
