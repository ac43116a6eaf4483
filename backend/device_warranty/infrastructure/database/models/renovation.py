"""SQLAlchemy ORM model for the Renovation entity."""

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from device_warranty.infrastructure.database.base import Base


class RenovationModel(Base):
    """ORM model — maps to the 'renovations' table."""

    __tablename__ = "renovations"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    renovation_date: Mapped[date] = mapped_column(Date, nullable=False)
    device_serial_number: Mapped[str] = mapped_column(
        ForeignKey("devices.serial_number", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<RenovationModel(id={self.id}, device='{self.device_serial_number}')>"
