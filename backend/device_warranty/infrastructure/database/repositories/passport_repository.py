"""Concrete repository implementation for Passport backed by SQLAlchemy."""

from sqlalchemy import String, func, literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from device_warranty.application.interfaces import PassportRepository
from device_warranty.domain.entities import Page, Passport, page_offset
from device_warranty.infrastructure.database.errors import storage_errors
from device_warranty.infrastructure.database.models import PassportModel


class SQLAlchemyPassportRepository(PassportRepository):
    """Implements the PassportRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: PassportModel) -> Passport:
        """Map ORM model → domain entity."""
        return Passport(
            id=model.id,
            name=model.name,
            model=model.model,
            serial_prefix=model.serial_prefix,
            from_serial_number=model.from_serial_number,
            to_serial_number=model.to_serial_number,
            warranty_months=model.warranty_months,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Passport) -> PassportModel:
        """Map domain entity → ORM model (for creation)."""
        return PassportModel(
            name=entity.name,
            model=entity.model,
            serial_prefix=entity.serial_prefix,
            from_serial_number=entity.from_serial_number,
            to_serial_number=entity.to_serial_number,
            warranty_months=entity.warranty_months,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, passport_id: int) -> Passport | None:
        with storage_errors("load passport"):
            result = await self._session.get(PassportModel, passport_id)
        return self._to_entity(result) if result else None

    async def get_page(self, page: int, size: int) -> Page[Passport]:
        stmt = (
            select(PassportModel)
            .order_by(PassportModel.serial_prefix, PassportModel.from_serial_number)
            .offset(page_offset(page, size))
            .limit(size)
        )
        with storage_errors("list passports"):
            total = await self._session.scalar(select(func.count()).select_from(PassportModel))
            result = await self._session.execute(stmt)
        return Page(
            items=[self._to_entity(row) for row in result.scalars().all()],
            current_page=page,
            size=size,
            total_items=total or 0,
        )

    async def find_by_prefix(self, serial: str) -> list[Passport]:
        # substr() compares exactly; LIKE would be case-insensitive on SQLite
        head = func.substr(
            literal(serial, type_=String), 1, func.length(PassportModel.serial_prefix)
        )
        stmt = (
            select(PassportModel)
            .where(head == PassportModel.serial_prefix)
            .order_by(PassportModel.from_serial_number)
        )
        with storage_errors("find passports by prefix"):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_overlapping(
        self,
        serial_prefix: str,
        from_serial_number: int,
        to_serial_number: int,
        exclude_id: int | None = None,
    ) -> list[Passport]:
        stmt = select(PassportModel).where(
            PassportModel.serial_prefix == serial_prefix,
            PassportModel.from_serial_number <= to_serial_number,
            PassportModel.to_serial_number >= from_serial_number,
        )
        if exclude_id is not None:
            stmt = stmt.where(PassportModel.id != exclude_id)
        with storage_errors("find overlapping passports"):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def lock_prefix(self, serial_prefix: str) -> None:
        # SQLite transactions open with BEGIN IMMEDIATE and already hold the write lock
        if self._session.get_bind().dialect.name != "postgresql":
            return
        with storage_errors("lock passport prefix"):
            await self._session.execute(
                select(func.pg_advisory_xact_lock(func.hashtext(serial_prefix)))
            )

    async def create(self, passport: Passport) -> Passport:
        model = self._to_model(passport)
        with storage_errors("create passport"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def update(self, passport: Passport) -> Passport:
        with storage_errors("update passport"):
            model = await self._session.get(PassportModel, passport.id)
            if model is None:
                raise ValueError(f"Passport {passport.id} not found in database")
            model.name = passport.name
            model.model = passport.model
            model.serial_prefix = passport.serial_prefix
            model.from_serial_number = passport.from_serial_number
            model.to_serial_number = passport.to_serial_number
            model.warranty_months = passport.warranty_months
            model.updated_at = passport.updated_at
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, passport_id: int) -> bool:
        with storage_errors("delete passport"):
            model = await self._session.get(PassportModel, passport_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True
