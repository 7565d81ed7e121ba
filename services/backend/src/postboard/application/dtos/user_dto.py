"""DTO for the public view of a user."""

from dataclasses import dataclass
from datetime import datetime

from postboard.domain.user import User


@dataclass(frozen=True)
class UserDTO:
    """A user as returned to callers.

    Carries no password or hash.
    """

    id: int
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserDTO":
        if user.id is None:
            msg = "Cannot build a view of an unsaved user"
            raise ValueError(msg)
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
