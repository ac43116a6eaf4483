"""SQLAlchemy ORM model for the Device entity."""

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from device_warranty.infrastructure.database.base import Base


class DeviceModel(Base):
    """ORM model — maps to the 'devices' table.

    ``passport_id`` is a plain column, not a foreign key: deleting a passport
    must neither cascade to nor be blocked by the devices bound to it.
    """

    __tablename__ = "devices"

    serial_number: Mapped[str] = mapped_column(String(100), primary_key=True)
    registration_date: Mapped[date] = mapped_column(Date, nullable=False)
    warranty_expiration_date: Mapped[date] = mapped_column(Date, nullable=False)
    warranty_months: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    passport_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_devices_owner", "owner_id"),
        Index("ix_devices_passport", "passport_id"),
    )

    def __repr__(self) -> str:
        return f"<DeviceModel(serial='{self.serial_number}', owner={self.owner_id})>"
