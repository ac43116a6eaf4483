"""Application service (use case) for device service history."""

import logging
from datetime import date

from device_warranty.application.interfaces import RenovationRepository
from device_warranty.application.services.device_service import DeviceService
from device_warranty.domain.entities import Renovation
from device_warranty.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class RenovationService:
    """Appends renovations to registered devices. Renovations are never edited."""

    def __init__(self, repository: RenovationRepository, device_service: DeviceService):
        self._repository = repository
        self._devices = device_service

    async def add_renovation(
        self,
        serial_number: str,
        description: str,
        renovation_date: date,
    ) -> Renovation:
        device = await self._devices.require_device(serial_number)
        renovation = Renovation(
            description=description,
            renovation_date=renovation_date,
            device_serial_number=device.serial_number,
        )
        created = await self._repository.create(renovation)
        logger.info("Recorded renovation %s for device %s", created.id, device.serial_number)
        return created

    async def get_renovation(self, renovation_id: int) -> Renovation:
        renovation = await self._repository.get_by_id(renovation_id)
        if renovation is None:
            raise EntityNotFoundError("Renovation", renovation_id)
        return renovation

    async def list_for_device(self, serial_number: str) -> list[Renovation]:
        await self._devices.require_device(serial_number)
        return await self._repository.list_for_device(serial_number)

    async def delete_renovation(self, renovation_id: int) -> bool:
        exists = await self._repository.get_by_id(renovation_id)
        if exists is None:
            raise EntityNotFoundError("Renovation", renovation_id)
        return await self._repository.delete(renovation_id)
