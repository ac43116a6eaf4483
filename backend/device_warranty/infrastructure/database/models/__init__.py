from .passport import PassportModel
from .user import UserModel
from .device import DeviceModel
from .renovation import RenovationModel

__all__ = [
    "PassportModel",
    "UserModel",
    "DeviceModel",
    "RenovationModel",
]
