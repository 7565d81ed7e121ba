"""Persistence failure classification.

Repository implementations never leak driver or ORM exceptions. Every
failure is reported as a PersistenceError carrying one of the kinds below,
which application services translate into domain errors.
"""

from enum import Enum


class PersistenceErrorKind(str, Enum):
    """Distinguishable categories of persistence failure."""

    UNIQUE_VIOLATION = "unique_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    NOT_FOUND = "not_found"
    OTHER = "other"


class PersistenceError(Exception):
    """Raised by repositories when a persistence operation fails.

    Attributes
    ----------
    kind
        The classified failure category
    entity
        Name of the entity the operation targeted (e.g. "User")
    constraint
        Constraint or column reported by the database, if known
    """

    def __init__(
        self,
        kind: PersistenceErrorKind,
        message: str = "",
        entity: str | None = None,
        constraint: str | None = None,
    ) -> None:
        self.kind = kind
        self.entity = entity
        self.constraint = constraint
        super().__init__(message or kind.value)

    @classmethod
    def not_found(cls, entity: str, entity_id: object) -> "PersistenceError":
        return cls(
            PersistenceErrorKind.NOT_FOUND,
            f"{entity} {entity_id} does not exist",
            entity=entity,
        )
