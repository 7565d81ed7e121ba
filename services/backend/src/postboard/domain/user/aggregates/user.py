from datetime import datetime
from typing import Optional, Union

from postboard.domain.shared.exceptions import ValidationError
from postboard.domain.shared.time import utc_now
from postboard.domain.user.value_objects import Email

MAX_NAME_LENGTH = 255


def _clean_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        msg = "Name cannot be empty"
        raise ValidationError(msg)
    if len(cleaned) > MAX_NAME_LENGTH:
        msg = f"Name cannot exceed {MAX_NAME_LENGTH} characters"
        raise ValidationError(msg)
    return cleaned


class User:
    """
    User aggregate root.

    Holds identity (email, display name) and the bcrypt hash of the user's
    password. The id is assigned by the database on first save, so a freshly
    created user has ``id is None``.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        name: str,
        password_hash: str,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._name = _clean_name(name)
        self._password_hash = password_hash
        self._id = id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def name(self) -> str:
        return self._name

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_email(self, email: Union[str, Email]) -> None:
        self._email = email if isinstance(email, Email) else Email(email)
        self._updated_at = utc_now()

    def rename(self, name: str) -> None:
        self._name = _clean_name(name)
        self._updated_at = utc_now()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        name: str,
        password_hash: str,
    ) -> "User":
        return cls(email=email, name=name, password_hash=password_hash)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: int,
        email: str,
        name: str,
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self.email!r}, name={self._name!r})"
