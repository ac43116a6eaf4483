"""HTTP tests for read endpoints when the database fails mid-request."""

from collections.abc import Iterator

import pytest
from httpx import AsyncClient

from device_warranty.application.services import (
    DeviceService,
    PassportResolver,
    PassportService,
)
from device_warranty.domain.exceptions import StorageFailureError
from device_warranty.infrastructure.dependencies import get_device_service, get_passport_service
from device_warranty.main import app


class FailingRepository:
    """Answers every repository call with a storage failure."""

    def __getattr__(self, operation: str):
        async def fail(*args, **kwargs):
            raise StorageFailureError(f"Storage failure during {operation}")

        return fail


@pytest.fixture
def failing_storage() -> Iterator[None]:
    repository = FailingRepository()
    app.dependency_overrides[get_passport_service] = lambda: PassportService(repository)
    app.dependency_overrides[get_device_service] = lambda: DeviceService(
        repository=repository,
        resolver=PassportResolver(repository),
        passport_repository=repository,
        user_repository=repository,
    )
    yield
    app.dependency_overrides.clear()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "url",
    [
        "/api/v1/devices",
        "/api/v1/devices/mine",
        "/api/v1/devices/AB123",
        "/api/v1/passports",
        "/api/v1/passports/by-prefix/AB123",
    ],
)
async def test_storage_failure_on_reads_is_a_typed_500(
    client: AsyncClient, admin_headers, failing_storage, url
):
    response = await client.get(url, headers=admin_headers)
    assert response.status_code == 500
    assert response.json()["detail"] == {
        "error": "Internal server error",
        "kind": "StorageFailure",
    }
