"""SQLAlchemy ORM model for the Passport entity."""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from device_warranty.infrastructure.database.base import Base


class PassportModel(Base):
    """ORM model — maps to the 'passports' table."""

    __tablename__ = "passports"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    model: Mapped[str] = mapped_column(String(255), nullable=False)
    serial_prefix: Mapped[str] = mapped_column(String(50), nullable=False)
    from_serial_number: Mapped[int] = mapped_column(BigInteger, nullable=False)
    to_serial_number: Mapped[int] = mapped_column(BigInteger, nullable=False)
    warranty_months: Mapped[int] = mapped_column(Integer, nullable=False)
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
        CheckConstraint("from_serial_number >= 0", name="from_non_negative"),
        CheckConstraint("from_serial_number <= to_serial_number", name="range_order"),
        CheckConstraint("warranty_months > 0", name="warranty_positive"),
        Index("ix_passports_prefix_range", "serial_prefix", "from_serial_number", "to_serial_number"),
    )

    def __repr__(self) -> str:
        return (
            f"<PassportModel(id={self.id}, prefix='{self.serial_prefix}', "
            f"range={self.from_serial_number}..{self.to_serial_number})>"
        )
