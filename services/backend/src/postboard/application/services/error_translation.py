"""Translation of persistence failures into domain errors.

Each service states which domain error a given failure kind means for
the operation at hand; kinds it does not name become InternalError.
"""

import logging
from typing import Callable, Optional

from postboard.domain.shared import (
    DomainException,
    InternalError,
    PersistenceError,
    PersistenceErrorKind,
)

logger = logging.getLogger(__name__)

ErrorFactory = Callable[[], DomainException]


def translate_persistence_error(
    error: PersistenceError,
    *,
    on_unique_violation: Optional[ErrorFactory] = None,
    on_foreign_key_violation: Optional[ErrorFactory] = None,
    on_not_found: Optional[ErrorFactory] = None,
) -> DomainException:
    """Map a classified persistence failure to the domain error to raise.

    Parameters
    ----------
    error
        The failure reported by a repository
    on_unique_violation, on_foreign_key_violation, on_not_found
        Factories for the domain error each kind stands for in the
        calling operation

    Returns
    -------
    The domain exception to raise (the caller raises it ``from error``)
    """
    factories: dict[PersistenceErrorKind, Optional[ErrorFactory]] = {
        PersistenceErrorKind.UNIQUE_VIOLATION: on_unique_violation,
        PersistenceErrorKind.FOREIGN_KEY_VIOLATION: on_foreign_key_violation,
        PersistenceErrorKind.NOT_FOUND: on_not_found,
    }
    factory = factories.get(error.kind)
    if factory is not None:
        return factory()

    logger.error(
        "Unmapped persistence failure (kind=%s, entity=%s): %s",
        error.kind.value,
        error.entity,
        error,
    )
    return InternalError(
        details={
            "persistence_kind": error.kind.value,
            "entity": error.entity,
            "cause": str(error),
        },
    )
