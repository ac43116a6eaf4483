"""Abstract repository interface (port) for Device persistence."""

from abc import ABC, abstractmethod

from device_warranty.domain.entities import Device, Page


class DeviceRepository(ABC):
    """Port for device persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_serial(
        self, serial_number: str, *, for_update: bool = False
    ) -> Device | None:
        """Retrieve a device by its serial number.

        ``for_update`` row-locks the device until the transaction ends.
        """
        ...

    @abstractmethod
    async def exists(self, serial_number: str) -> bool:
        ...

    @abstractmethod
    async def get_page(
        self,
        page: int,
        size: int,
        *,
        search: str | None = None,
        owner_id: int | None = None,
    ) -> Page[Device]:
        """Retrieve one page of devices.

        ``search`` is a case-insensitive substring of the serial number;
        ``owner_id`` restricts the page to one owner's devices.
        """
        ...

    @abstractmethod
    async def create(self, device: Device) -> Device:
        """Persist a new device. Raises DuplicateEntityError if the serial is taken."""
        ...

    @abstractmethod
    async def update(self, device: Device) -> Device:
        """Update dates, terms and comment of an existing device. The owner is never written here."""
        ...

    @abstractmethod
    async def claim_owner(self, device: Device) -> bool:
        """Store ``device.owner_id`` and its new expiration if the stored device has no owner.

        Returns False when the device is missing or already owned.
        """
        ...

    @abstractmethod
    async def delete_by_serial(self, serial_number: str) -> bool:
        """Delete a device. Raises DependentRecordsError if renovations reference it."""
        ...
