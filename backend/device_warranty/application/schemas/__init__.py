from .common import CamelModel, PageResponse
from .passport import PassportCreate, PassportUpdate, PassportResponse
from .device import DeviceCreate, DeviceUpdate, DeviceResponse
from .renovation import RenovationCreate, RenovationResponse

__all__ = [
    "CamelModel",
    "PageResponse",
    "PassportCreate",
    "PassportUpdate",
    "PassportResponse",
    "DeviceCreate",
    "DeviceUpdate",
    "DeviceResponse",
    "RenovationCreate",
    "RenovationResponse",
]
