"""Abstract read-only port onto the user directory."""

from abc import ABC, abstractmethod

from device_warranty.domain.entities import User


class UserRepository(ABC):
    """Resolves user ids to directory entries."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...
