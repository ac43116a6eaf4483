"""Domain entity — a physical device under warranty tracking."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from dateutil.relativedelta import relativedelta

# An attached owner doubles the passport's nominal warranty. Fixed business policy.
OWNER_WARRANTY_MULTIPLIER = 2


def effective_warranty_months(warranty_months: int, owned: bool) -> int:
    return warranty_months * OWNER_WARRANTY_MULTIPLIER if owned else warranty_months


def warranty_expiration(registration_date: date, warranty_months: int, owned: bool) -> date:
    """Registration date plus the effective months, clamped to month end."""
    months = effective_warranty_months(warranty_months, owned)
    return registration_date + relativedelta(months=months)


@dataclass
class Device:
    """Device identified by its serial number, bound to one resolved passport.

    ``warranty_months`` keeps the passport's nominal terms as of binding so a
    device outlives deletion of its passport.
    """

    serial_number: str
    registration_date: date
    warranty_months: int
    passport_id: int | None = None
    owner_id: int | None = None
    comment: str | None = None
    warranty_expiration_date: date | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.warranty_expiration_date is None:
            self.recompute_warranty()

    @property
    def is_owned(self) -> bool:
        return self.owner_id is not None

    def recompute_warranty(self, warranty_months: int | None = None) -> None:
        if warranty_months is not None:
            self.warranty_months = warranty_months
        self.warranty_expiration_date = warranty_expiration(
            self.registration_date, self.warranty_months, self.is_owned
        )

    def attach_owner(self, owner_id: int) -> None:
        """Bind an owner. Callers must check ``is_owned`` first; ownership never reverts."""
        self.owner_id = owner_id
        self.recompute_warranty()
        self.updated_at = datetime.now(timezone.utc)

    def update(
        self,
        registration_date: date,
        comment: str | None,
        warranty_months: int | None = None,
    ) -> None:
        self.registration_date = registration_date
        self.comment = comment
        self.recompute_warranty(warranty_months)
        self.updated_at = datetime.now(timezone.utc)
