from postboard.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InternalError,
    ValidationError,
)
from postboard.domain.shared.persistence import PersistenceError, PersistenceErrorKind

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "InternalError",
    "PersistenceError",
    "PersistenceErrorKind",
    "ValidationError",
]
