"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from device_warranty.application.services import (
    DeviceService,
    PassportResolver,
    PassportService,
    RenovationService,
)
from device_warranty.domain.entities import Principal
from device_warranty.infrastructure.auth.jwt import decode_token
from device_warranty.infrastructure.database.session import get_db_session
from device_warranty.infrastructure.database.repositories import (
    SQLAlchemyDeviceRepository,
    SQLAlchemyPassportRepository,
    SQLAlchemyRenovationRepository,
    SQLAlchemyUserRepository,
)

_bearer_scheme = HTTPBearer(auto_error=False)


# ── Services ─────────────────────────────────────────────────────────


async def get_passport_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[PassportService, None]:
    """Provides a PassportService instance with its repository wired up."""
    yield PassportService(SQLAlchemyPassportRepository(session))


async def get_passport_resolver(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[PassportResolver, None]:
    yield PassportResolver(SQLAlchemyPassportRepository(session))


def _build_device_service(session: AsyncSession) -> DeviceService:
    passport_repository = SQLAlchemyPassportRepository(session)
    return DeviceService(
        repository=SQLAlchemyDeviceRepository(session),
        resolver=PassportResolver(passport_repository),
        passport_repository=passport_repository,
        user_repository=SQLAlchemyUserRepository(session),
    )


async def get_device_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DeviceService, None]:
    """Provides a DeviceService with passport resolution and the user directory."""
    yield _build_device_service(session)


async def get_renovation_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[RenovationService, None]:
    """Provides a RenovationService sharing the request's session with its DeviceService."""
    yield RenovationService(
        repository=SQLAlchemyRenovationRepository(session),
        device_service=_build_device_service(session),
    )


# ── Authentication ───────────────────────────────────────────────────


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer_scheme)],
) -> Principal:
    """Extract and validate the caller from the bearer token."""
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise unauthorized
    principal = decode_token(credentials.credentials)
    if principal is None:
        raise unauthorized
    return principal


async def require_admin(
    principal: Annotated[Principal, Depends(get_current_principal)],
) -> Principal:
    if not principal.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )
    return principal
