"""Resolves a raw serial number to the single passport that governs it."""

import logging

from device_warranty.application.interfaces import PassportRepository
from device_warranty.domain.entities import Passport
from device_warranty.domain.exceptions import (
    AmbiguousPassportError,
    InvalidSerialError,
    MalformedSerialError,
    PassportNotFoundError,
)
from device_warranty.domain.serial_range import parse_serial

logger = logging.getLogger(__name__)


class PassportResolver:
    """Serial → passport lookup over the passport repository.

    Stored prefixes match when they are a prefix of the serial's leading
    alphabetic run, so ``"ST"`` governs ``"ST150"`` and ``"STX150"`` alike.
    """

    def __init__(self, repository: PassportRepository):
        self._repository = repository

    async def resolve(self, serial: str) -> Passport:
        try:
            parsed = parse_serial(serial)
        except MalformedSerialError as e:
            raise InvalidSerialError(serial) from e

        candidates = await self._repository.find_by_prefix(parsed.prefix)
        matches = [p for p in candidates if p.covers(parsed.number)]

        if not matches:
            raise PassportNotFoundError(serial)
        if len(matches) > 1:
            ids = [p.id for p in matches]
            logger.error(
                "Overlap invariant violated: serial %s resolves to passports %s", serial, ids
            )
            raise AmbiguousPassportError(serial, ids)
        return matches[0]
