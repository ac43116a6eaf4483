"""Application service (use case) for Passport registration and maintenance."""

import logging

from device_warranty.application.interfaces import PassportRepository
from device_warranty.application.schemas import PassportCreate, PassportUpdate
from device_warranty.domain.entities import Page, Passport, page_offset
from device_warranty.domain.exceptions import (
    DuplicateEntityError,
    PassportNotFoundError,
    StorageFailureError,
)

logger = logging.getLogger(__name__)


class PassportService:
    """Orchestrates passport CRUD and enforces the overlap-free invariant.

    The overlap query and the subsequent write share the caller's
    transaction; ``lock_prefix`` keeps concurrent writers for the same
    prefix from interleaving between the two.
    """

    def __init__(self, repository: PassportRepository):
        self._repository = repository

    async def find_passport(self, passport_id: int) -> Passport | None:
        return await self._repository.get_by_id(passport_id)

    async def get_passport(self, passport_id: int) -> Passport:
        passport = await self._repository.get_by_id(passport_id)
        if passport is None:
            raise PassportNotFoundError(passport_id)
        return passport

    async def list_passports(self, page: int = 1, size: int = 10) -> Page[Passport]:
        page_offset(page, size)
        return await self._repository.get_page(page, size)

    async def list_by_serial_prefix(self, serial: str) -> list[Passport]:
        return await self._repository.find_by_prefix(serial)

    async def create_passport(self, data: PassportCreate) -> Passport:
        await self._ensure_no_overlap(
            data.serial_prefix, data.from_serial_number, data.to_serial_number
        )
        passport = Passport(
            name=data.name,
            model=data.model,
            serial_prefix=data.serial_prefix,
            from_serial_number=data.from_serial_number,
            to_serial_number=data.to_serial_number,
            warranty_months=data.warranty_months,
        )
        created = await self._repository.create(passport)
        logger.info(
            "Registered passport %s for %s[%d..%d]",
            created.id,
            created.serial_prefix,
            created.from_serial_number,
            created.to_serial_number,
        )
        return created

    async def update_passport(self, passport_id: int, data: PassportUpdate) -> Passport:
        passport = await self.get_passport(passport_id)
        await self._ensure_no_overlap(
            data.serial_prefix,
            data.from_serial_number,
            data.to_serial_number,
            exclude_id=passport_id,
        )
        passport.update(
            name=data.name,
            model=data.model,
            serial_prefix=data.serial_prefix,
            from_serial_number=data.from_serial_number,
            to_serial_number=data.to_serial_number,
            warranty_months=data.warranty_months,
        )
        return await self._repository.update(passport)

    async def delete_passport(self, passport_id: int) -> bool:
        """Delete a passport. Devices already bound to it keep their terms."""
        exists = await self._repository.get_by_id(passport_id)
        if exists is None:
            raise PassportNotFoundError(passport_id)
        try:
            return await self._repository.delete(passport_id)
        except StorageFailureError as e:
            raise StorageFailureError("Can't delete passport") from e

    async def _ensure_no_overlap(
        self,
        serial_prefix: str,
        from_serial_number: int,
        to_serial_number: int,
        exclude_id: int | None = None,
    ) -> None:
        await self._repository.lock_prefix(serial_prefix)
        clashes = await self._repository.find_overlapping(
            serial_prefix, from_serial_number, to_serial_number, exclude_id=exclude_id
        )
        if clashes:
            logger.warning(
                "Rejected passport range %s[%d..%d]: overlaps passport(s) %s",
                serial_prefix,
                from_serial_number,
                to_serial_number,
                [p.id for p in clashes],
            )
            raise DuplicateEntityError(
                "Passport",
                "serial_range",
                f"{serial_prefix}[{from_serial_number}..{to_serial_number}]",
                message="Serial number already exists",
            )
