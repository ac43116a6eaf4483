"""Abstract repository interface (port) for Renovation persistence."""

from abc import ABC, abstractmethod

from device_warranty.domain.entities import Renovation


class RenovationRepository(ABC):
    """Port for renovation persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, renovation_id: int) -> Renovation | None:
        ...

    @abstractmethod
    async def list_for_device(self, serial_number: str) -> list[Renovation]:
        """All renovations of one device, newest first."""
        ...

    @abstractmethod
    async def create(self, renovation: Renovation) -> Renovation:
        ...

    @abstractmethod
    async def delete(self, renovation_id: int) -> bool:
        """Delete a renovation. Returns True if deleted, False if not found."""
        ...
