"""Classification of SQLAlchemy failures into PersistenceErrorKind.

PostgreSQL reports constraint violations through SQLSTATE codes, which
the asyncpg adapter exposes on ``IntegrityError.orig``. SQLite has no
SQLSTATE, so its constraint messages are matched instead.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError

from postboard.domain.shared.persistence import PersistenceError, PersistenceErrorKind

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION_SQLSTATE = "23505"
FOREIGN_KEY_VIOLATION_SQLSTATE = "23503"

_SQLSTATE_KINDS = {
    UNIQUE_VIOLATION_SQLSTATE: PersistenceErrorKind.UNIQUE_VIOLATION,
    FOREIGN_KEY_VIOLATION_SQLSTATE: PersistenceErrorKind.FOREIGN_KEY_VIOLATION,
}

_MESSAGE_KINDS = (
    ("unique constraint failed", PersistenceErrorKind.UNIQUE_VIOLATION),
    ("duplicate key value", PersistenceErrorKind.UNIQUE_VIOLATION),
    ("foreign key constraint failed", PersistenceErrorKind.FOREIGN_KEY_VIOLATION),
    ("violates foreign key constraint", PersistenceErrorKind.FOREIGN_KEY_VIOLATION),
)


def _sqlstate(orig: object) -> str | None:
    for attr in ("sqlstate", "pgcode"):
        value = getattr(orig, attr, None)
        if value:
            return str(value)
    return None


def classify_integrity_error(error: IntegrityError) -> PersistenceErrorKind:
    """Return the failure kind of an integrity error."""
    sqlstate = _sqlstate(error.orig)
    if sqlstate in _SQLSTATE_KINDS:
        return _SQLSTATE_KINDS[sqlstate]

    message = str(error.orig).lower()
    for fragment, kind in _MESSAGE_KINDS:
        if fragment in message:
            return kind
    return PersistenceErrorKind.OTHER


@contextmanager
def persistence_errors(entity: str) -> Iterator[None]:
    """Re-raise any database failure in the block as PersistenceError.

    Parameters
    ----------
    entity
        Name of the entity the block operates on, e.g. "User"
    """
    try:
        yield
    except PersistenceError:
        raise
    except NoResultFound as e:
        raise PersistenceError(
            PersistenceErrorKind.NOT_FOUND,
            f"{entity} does not exist",
            entity=entity,
        ) from e
    except IntegrityError as e:
        kind = classify_integrity_error(e)
        logger.debug("Integrity error on %s classified as %s", entity, kind.value)
        raise PersistenceError(kind, str(e.orig), entity=entity) from e
    except (SQLAlchemyError, OSError) as e:
        raise PersistenceError(PersistenceErrorKind.OTHER, str(e), entity=entity) from e
