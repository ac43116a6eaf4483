"""Concrete repository implementation for Renovation backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from device_warranty.application.interfaces import RenovationRepository
from device_warranty.domain.entities import Renovation
from device_warranty.infrastructure.database.errors import storage_errors
from device_warranty.infrastructure.database.models import RenovationModel


class SQLAlchemyRenovationRepository(RenovationRepository):
    """Implements the RenovationRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: RenovationModel) -> Renovation:
        return Renovation(
            id=model.id,
            description=model.description,
            renovation_date=model.renovation_date,
            device_serial_number=model.device_serial_number,
            created_at=model.created_at,
        )

    async def get_by_id(self, renovation_id: int) -> Renovation | None:
        with storage_errors("load renovation"):
            result = await self._session.get(RenovationModel, renovation_id)
        return self._to_entity(result) if result else None

    async def list_for_device(self, serial_number: str) -> list[Renovation]:
        stmt = (
            select(RenovationModel)
            .where(RenovationModel.device_serial_number == serial_number)
            .order_by(RenovationModel.renovation_date.desc(), RenovationModel.id.desc())
        )
        with storage_errors("list renovations"):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, renovation: Renovation) -> Renovation:
        model = RenovationModel(
            description=renovation.description,
            renovation_date=renovation.renovation_date,
            device_serial_number=renovation.device_serial_number,
            created_at=renovation.created_at,
        )
        with storage_errors("create renovation"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, renovation_id: int) -> bool:
        with storage_errors("delete renovation"):
            model = await self._session.get(RenovationModel, renovation_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True
