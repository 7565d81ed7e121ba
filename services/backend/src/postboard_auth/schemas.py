"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The subject of the token (the user's id)
    email
        The user's email address at issue time
    name
        The user's display name at issue time
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    """

    user_id: int
    email: str
    name: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the token has expired."""
        return (now or datetime.now(tz=self.expires_at.tzinfo)) > self.expires_at

    def to_claims(self) -> dict[str, Any]:
        """Return the identity claims in their wire shape."""
        return {"sub": self.user_id, "email": self.email, "name": self.name}
