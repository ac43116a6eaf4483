"""Maps domain error kinds to HTTP responses."""

import logging

from fastapi import HTTPException, status

from device_warranty.domain.exceptions import DomainError, ErrorKind

logger = logging.getLogger(__name__)

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.MALFORMED_SERIAL: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_SERIAL: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_EXISTS: status.HTTP_400_BAD_REQUEST,
    ErrorKind.HAS_DEPENDENT_RECORDS: status.HTTP_400_BAD_REQUEST,
    ErrorKind.PASSPORT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DEVICE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.NOT_REGISTERED: status.HTTP_404_NOT_FOUND,
    ErrorKind.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

# System faults: detail stays generic, the cause goes to the log
_INTERNAL_KINDS = {ErrorKind.AMBIGUOUS_PASSPORT, ErrorKind.STORAGE_FAILURE}


def http_error(error: DomainError) -> HTTPException:
    """Build the HTTPException for ``error``; detail is ``{"error", "kind"}``."""
    if error.kind in _INTERNAL_KINDS:
        logger.error("Internal fault (%s): %s", error.kind.value, error.message)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Internal server error", "kind": error.kind.value},
        )
    return HTTPException(
        status_code=_STATUS_BY_KIND.get(error.kind, status.HTTP_400_BAD_REQUEST),
        detail={"error": error.message, "kind": error.kind.value},
    )
