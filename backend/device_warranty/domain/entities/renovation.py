"""Domain entity — an immutable service-history record."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone


@dataclass
class Renovation:
    """Service performed on a device. References the device by serial only."""

    description: str
    renovation_date: date
    device_serial_number: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
