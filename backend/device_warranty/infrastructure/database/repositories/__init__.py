from .passport_repository import SQLAlchemyPassportRepository
from .device_repository import SQLAlchemyDeviceRepository
from .renovation_repository import SQLAlchemyRenovationRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyPassportRepository",
    "SQLAlchemyDeviceRepository",
    "SQLAlchemyRenovationRepository",
    "SQLAlchemyUserRepository",
]
