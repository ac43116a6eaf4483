"""Database and HTTP client fixtures for integration tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from device_warranty.domain.entities import UserRole
from device_warranty.infrastructure.auth.jwt import create_access_token
from device_warranty.infrastructure.database import (
    Base,
    UserModel,
    async_session_factory,
    engine,
)
from device_warranty.main import app

USER_ID = 1
ADMIN_ID = 2


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[None, None]:
    """Fresh schema per test; pooled connections are closed at teardown."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    async with async_session_factory() as session:
        session.add_all(
            [
                UserModel(id=USER_ID, full_name="Jan Kowalski", email="jan@example.com", role="USER"),
                UserModel(id=ADMIN_ID, full_name="Admin", email="admin@example.com", role="ADMIN"),
            ]
        )
        await session.commit()
    yield
    await engine.dispose()


@pytest_asyncio.fixture
async def session(database) -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(database) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def user_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(USER_ID, UserRole.USER)}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(ADMIN_ID, UserRole.ADMIN)}"}
