"""Concrete repository implementation for Device backed by SQLAlchemy."""

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import FlushError

from device_warranty.application.interfaces import DeviceRepository
from device_warranty.domain.entities import Device, Page, page_offset
from device_warranty.domain.exceptions import DependentRecordsError, DuplicateEntityError
from device_warranty.infrastructure.database.errors import storage_errors
from device_warranty.infrastructure.database.models import DeviceModel


class SQLAlchemyDeviceRepository(DeviceRepository):
    """Implements the DeviceRepository port using SQLAlchemy async sessions.

    The serial-number primary key is the final arbiter for concurrent
    registrations: a lost race surfaces as DuplicateEntityError. Owner
    claims are a conditional UPDATE so only one anonymous-to-owned
    transition can match.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: DeviceModel) -> Device:
        """Map ORM model → domain entity."""
        return Device(
            serial_number=model.serial_number,
            registration_date=model.registration_date,
            warranty_expiration_date=model.warranty_expiration_date,
            warranty_months=model.warranty_months,
            comment=model.comment,
            owner_id=model.owner_id,
            passport_id=model.passport_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Device) -> DeviceModel:
        """Map domain entity → ORM model (for creation)."""
        return DeviceModel(
            serial_number=entity.serial_number,
            registration_date=entity.registration_date,
            warranty_expiration_date=entity.warranty_expiration_date,
            warranty_months=entity.warranty_months,
            comment=entity.comment,
            owner_id=entity.owner_id,
            passport_id=entity.passport_id,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_serial(
        self, serial_number: str, *, for_update: bool = False
    ) -> Device | None:
        stmt = select(DeviceModel).where(DeviceModel.serial_number == serial_number)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        with storage_errors("load device"):
            result = await self._session.scalar(stmt)
        return self._to_entity(result) if result else None

    async def exists(self, serial_number: str) -> bool:
        stmt = select(DeviceModel.serial_number).where(
            DeviceModel.serial_number == serial_number
        )
        with storage_errors("check device"):
            found = await self._session.scalar(stmt)
        return found is not None

    async def get_page(
        self,
        page: int,
        size: int,
        *,
        search: str | None = None,
        owner_id: int | None = None,
    ) -> Page[Device]:
        conditions = []
        if search:
            conditions.append(
                func.lower(DeviceModel.serial_number).contains(search.lower(), autoescape=True)
            )
        if owner_id is not None:
            conditions.append(DeviceModel.owner_id == owner_id)

        count_stmt = select(func.count()).select_from(DeviceModel).where(*conditions)
        stmt = (
            select(DeviceModel)
            .where(*conditions)
            .order_by(DeviceModel.serial_number)
            .offset(page_offset(page, size))
            .limit(size)
        )
        with storage_errors("list devices"):
            total = await self._session.scalar(count_stmt)
            result = await self._session.execute(stmt)
        return Page(
            items=[self._to_entity(row) for row in result.scalars().all()],
            current_page=page,
            size=size,
            total_items=total or 0,
        )

    async def create(self, device: Device) -> Device:
        model = self._to_model(device)
        with storage_errors("create device"):
            try:
                self._session.add(model)
                await self._session.flush()
            except (IntegrityError, FlushError) as e:
                raise DuplicateEntityError(
                    "Device",
                    "serial_number",
                    device.serial_number,
                    message="Device already registered",
                ) from e
        return self._to_entity(model)

    async def update(self, device: Device) -> Device:
        with storage_errors("update device"):
            model = await self._session.get(DeviceModel, device.serial_number)
            if model is None:
                raise ValueError(f"Device {device.serial_number} not found in database")
            model.registration_date = device.registration_date
            model.warranty_expiration_date = device.warranty_expiration_date
            model.warranty_months = device.warranty_months
            model.comment = device.comment
            model.updated_at = device.updated_at
            await self._session.flush()
        return self._to_entity(model)

    async def claim_owner(self, device: Device) -> bool:
        stmt = (
            update(DeviceModel)
            .where(
                DeviceModel.serial_number == device.serial_number,
                DeviceModel.owner_id.is_(None),
            )
            .values(
                owner_id=device.owner_id,
                warranty_expiration_date=device.warranty_expiration_date,
                updated_at=device.updated_at,
            )
        )
        with storage_errors("claim device"):
            result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def delete_by_serial(self, serial_number: str) -> bool:
        stmt = delete(DeviceModel).where(DeviceModel.serial_number == serial_number)
        with storage_errors("delete device"):
            try:
                result = await self._session.execute(stmt)
            except IntegrityError as e:
                raise DependentRecordsError(
                    "Device",
                    serial_number,
                    "Cannot delete device: renovations exist",
                ) from e
        return result.rowcount > 0
