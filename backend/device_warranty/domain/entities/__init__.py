from .passport import Passport
from .device import (
    Device,
    OWNER_WARRANTY_MULTIPLIER,
    effective_warranty_months,
    warranty_expiration,
)
from .renovation import Renovation
from .user import Principal, User, UserRole
from .page import Page, page_offset

__all__ = [
    "Passport",
    "Device",
    "OWNER_WARRANTY_MULTIPLIER",
    "effective_warranty_months",
    "warranty_expiration",
    "Renovation",
    "Principal",
    "User",
    "UserRole",
    "Page",
    "page_offset",
]
