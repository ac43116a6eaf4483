"""SQLAlchemy ORM model for user directory entries."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from device_warranty.infrastructure.database.base import Base


class UserModel(Base):
    """ORM model — maps to the 'users' table."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="USER")

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email='{self.email}', role={self.role})>"
