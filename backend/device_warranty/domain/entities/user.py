"""User directory entries and the authenticated principal."""

from dataclasses import dataclass
from enum import Enum


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


@dataclass
class User:
    """Read-only view of a user from the directory."""

    id: int
    full_name: str
    email: str
    role: UserRole = UserRole.USER


@dataclass(frozen=True)
class Principal:
    """Already-authenticated caller, passed explicitly into operations."""

    user_id: int
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN
