"""Abstract repository interface (port) for Passport persistence."""

from abc import ABC, abstractmethod

from device_warranty.domain.entities import Page, Passport


class PassportRepository(ABC):
    """Port for passport persistence — implemented in the infrastructure layer.

    ``lock_prefix`` followed by ``find_overlapping`` and a write must run in
    the same transaction so two concurrent writers for one prefix cannot both
    observe zero overlaps and commit.
    """

    @abstractmethod
    async def get_by_id(self, passport_id: int) -> Passport | None:
        """Retrieve a single passport by its ID."""
        ...

    @abstractmethod
    async def get_page(self, page: int, size: int) -> Page[Passport]:
        """Retrieve one 1-based page of passports."""
        ...

    @abstractmethod
    async def find_by_prefix(self, serial: str) -> list[Passport]:
        """Passports whose ``serial_prefix`` is a prefix of ``serial`` (or equals it)."""
        ...

    @abstractmethod
    async def find_overlapping(
        self,
        serial_prefix: str,
        from_serial_number: int,
        to_serial_number: int,
        exclude_id: int | None = None,
    ) -> list[Passport]:
        """Passports with exactly this prefix whose closed range intersects the given one."""
        ...

    @abstractmethod
    async def lock_prefix(self, serial_prefix: str) -> None:
        """Serialize writers for ``serial_prefix`` until the current transaction ends."""
        ...

    @abstractmethod
    async def create(self, passport: Passport) -> Passport:
        """Persist a new passport and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, passport: Passport) -> Passport:
        """Update an existing passport."""
        ...

    @abstractmethod
    async def delete(self, passport_id: int) -> bool:
        """Delete a passport. Returns True if deleted, False if not found."""
        ...
