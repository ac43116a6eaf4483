"""Translation of SQLAlchemy failures into domain errors."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from device_warranty.domain.exceptions import DomainError, StorageFailureError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise unexpected database errors as StorageFailureError.

    Domain errors raised inside the block (e.g. translated integrity
    violations) pass through untouched.

    Usage:
        with storage_errors("create device"):
            await session.flush()
    """
    try:
        yield
    except DomainError:
        raise
    except SQLAlchemyError as exc:
        logger.error("Storage failure during %s: %s", operation, exc)
        raise StorageFailureError(f"Storage failure during {operation}") from exc
