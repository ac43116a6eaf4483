"""Application service (use case) for the device warranty lifecycle.

States: unregistered → registered (anonymous) → registered (owned), plus a
terminal deleted state. This service is the only writer of
``warranty_expiration_date``.
"""

import logging
from datetime import date

from device_warranty.application.interfaces import (
    DeviceRepository,
    PassportRepository,
    UserRepository,
)
from device_warranty.application.services.passport_resolver import PassportResolver
from device_warranty.domain.entities import Device, Page, page_offset
from device_warranty.domain.exceptions import (
    DeviceNotFoundError,
    DeviceNotRegisteredError,
    DuplicateEntityError,
    InvalidSerialError,
    PassportNotFoundError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


class DeviceService:
    """Orchestrates device registration, ownership and warranty recomputation."""

    def __init__(
        self,
        repository: DeviceRepository,
        resolver: PassportResolver,
        passport_repository: PassportRepository,
        user_repository: UserRepository,
    ):
        self._repository = repository
        self._resolver = resolver
        self._passports = passport_repository
        self._users = user_repository

    # ── Registration ─────────────────────────────────────────────────

    async def register_device(
        self,
        serial_number: str,
        registration_date: date,
        owner_id: int | None = None,
    ) -> Device:
        """Resolve the passport and persist a device. No existence check."""
        try:
            passport = await self._resolver.resolve(serial_number)
        except (InvalidSerialError, PassportNotFoundError) as e:
            raise InvalidSerialError(serial_number) from e

        device = Device(
            serial_number=serial_number,
            registration_date=registration_date,
            warranty_months=passport.warranty_months,
            passport_id=passport.id,
            owner_id=owner_id,
        )
        created = await self._repository.create(device)
        logger.info(
            "Registered device %s under passport %s (owned=%s, expires %s)",
            created.serial_number,
            created.passport_id,
            created.is_owned,
            created.warranty_expiration_date,
        )
        return created

    async def register_new_device(
        self,
        serial_number: str,
        registration_date: date,
        owner_id: int | None,
    ) -> Device:
        """Owned registration of a serial that must not exist yet."""
        await self.ensure_not_registered(serial_number)
        if owner_id is None or await self._users.get_by_id(owner_id) is None:
            raise UserNotFoundError(owner_id)
        return await self.register_device(serial_number, registration_date, owner_id)

    async def add_anonymous_device(self, serial_number: str, registration_date: date) -> Device:
        """Walk-in registration without an owner."""
        await self.ensure_not_registered(serial_number)
        return await self.register_device(serial_number, registration_date, None)

    async def ensure_not_registered(self, serial_number: str) -> None:
        if await self._repository.get_by_serial(serial_number) is not None:
            logger.warning("Device %s is already registered", serial_number)
            raise DuplicateEntityError(
                "Device", "serial_number", serial_number, message="Device already registered"
            )

    # ── Lookup ───────────────────────────────────────────────────────

    async def find_device(self, serial_number: str) -> Device | None:
        return await self._repository.get_by_serial(serial_number)

    async def require_device(self, serial_number: str, *, for_update: bool = False) -> Device:
        """Precondition gate for operations on an existing device."""
        device = await self._repository.get_by_serial(serial_number, for_update=for_update)
        if device is None:
            raise DeviceNotRegisteredError(serial_number)
        return device

    async def list_devices(
        self,
        search: str | None = None,
        page: int = 1,
        size: int = 10,
    ) -> Page[Device]:
        page_offset(page, size)
        return await self._repository.get_page(page, size, search=search or None)

    async def list_owner_devices(self, owner_id: int, page: int = 1, size: int = 10) -> Page[Device]:
        page_offset(page, size)
        return await self._repository.get_page(page, size, owner_id=owner_id)

    # ── Mutation ─────────────────────────────────────────────────────

    async def attach_owner(self, serial_number: str, owner_id: int) -> Device:
        """Bind an owner to an anonymous device, doubling its warranty."""
        device = await self.require_device(serial_number, for_update=True)
        if device.is_owned:
            raise self._already_owned(serial_number)
        if await self._users.get_by_id(owner_id) is None:
            raise UserNotFoundError(owner_id)
        device.attach_owner(owner_id)
        if not await self._repository.claim_owner(device):
            # Claimed by a concurrent request after our read
            raise self._already_owned(serial_number)
        logger.info("Attached owner %s to device %s", owner_id, serial_number)
        return device

    async def update_device(
        self,
        serial_number: str,
        registration_date: date,
        comment: str | None,
    ) -> Device:
        device = await self._repository.get_by_serial(serial_number, for_update=True)
        if device is None:
            raise DeviceNotFoundError(serial_number)

        # Current passport terms win; a deleted passport leaves the stored terms.
        warranty_months = None
        if device.passport_id is not None:
            passport = await self._passports.get_by_id(device.passport_id)
            if passport is not None:
                warranty_months = passport.warranty_months

        device.update(registration_date, comment, warranty_months)
        return await self._repository.update(device)

    @staticmethod
    def _already_owned(serial_number: str) -> DuplicateEntityError:
        return DuplicateEntityError(
            "Device", "owner", serial_number, message="Device already has an owner"
        )

    async def delete_device(self, serial_number: str) -> bool:
        """Delete a device. Raises DependentRecordsError while renovations exist."""
        deleted = await self._repository.delete_by_serial(serial_number)
        if deleted:
            logger.info("Deleted device %s", serial_number)
        return deleted
