"""Read-only user directory backed by SQLAlchemy."""

from sqlalchemy.ext.asyncio import AsyncSession

from device_warranty.application.interfaces import UserRepository
from device_warranty.domain.entities import User, UserRole
from device_warranty.infrastructure.database.errors import storage_errors
from device_warranty.infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, user_id: int) -> User | None:
        with storage_errors("load user"):
            model = await self._session.get(UserModel, user_id)
        if model is None:
            return None
        return User(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            role=UserRole(model.role),
        )
