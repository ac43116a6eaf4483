"""Domain entity — warranty passport (coverage template)."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from device_warranty.domain.serial_range import SerialRange, contains


@dataclass
class Passport:
    """Binds a serial prefix and numeric range to a warranty duration."""

    name: str
    model: str
    serial_prefix: str
    from_serial_number: int
    to_serial_number: int
    warranty_months: int
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def serial_range(self) -> SerialRange:
        return SerialRange(self.from_serial_number, self.to_serial_number)

    def covers(self, number: int) -> bool:
        return contains(self.serial_range, number)

    def update(
        self,
        *,
        name: str,
        model: str,
        serial_prefix: str,
        from_serial_number: int,
        to_serial_number: int,
        warranty_months: int,
    ) -> None:
        """Replace all editable terms and refresh the updated_at timestamp."""
        self.name = name
        self.model = model
        self.serial_prefix = serial_prefix
        self.from_serial_number = from_serial_number
        self.to_serial_number = to_serial_number
        self.warranty_months = warranty_months
        self.updated_at = datetime.now(timezone.utc)
