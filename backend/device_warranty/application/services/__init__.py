from .passport_service import PassportService
from .passport_resolver import PassportResolver
from .device_service import DeviceService
from .renovation_service import RenovationService

__all__ = [
    "PassportService",
    "PassportResolver",
    "DeviceService",
    "RenovationService",
]
