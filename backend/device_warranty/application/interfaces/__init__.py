from .passport_repository import PassportRepository
from .device_repository import DeviceRepository
from .renovation_repository import RenovationRepository
from .user_repository import UserRepository

__all__ = [
    "PassportRepository",
    "DeviceRepository",
    "RenovationRepository",
    "UserRepository",
]
