"""HTTP tests for device registration, ownership and service history."""

import pytest
import pytest_asyncio
from httpx import AsyncClient

REGISTRATION = {"serialNumber": "AB123", "registrationDate": "2025-10-18"}


@pytest_asyncio.fixture
async def ab_passport(client: AsyncClient, admin_headers) -> dict:
    response = await client.post(
        "/api/v1/passports",
        json={
            "name": "Passport A",
            "model": "ModelX",
            "serialPrefix": "AB",
            "warrantyMonths": 12,
            "fromSerialNumber": 100,
            "toSerialNumber": 200,
        },
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest_asyncio.fixture
async def anonymous_device(client: AsyncClient, admin_headers, ab_passport) -> dict:
    response = await client.post("/api/v1/devices/anonymous", json=REGISTRATION, headers=admin_headers)
    assert response.status_code == 201, response.text
    return response.json()


# ── Registration ─────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_register_owned_device(client: AsyncClient, user_headers, ab_passport):
    response = await client.post("/api/v1/devices", json=REGISTRATION, headers=user_headers)
    assert response.status_code == 201
    body = response.json()
    assert body["ownerId"] == 1
    assert body["passportId"] == ab_passport["id"]
    assert body["warrantyExpirationDate"] == "2027-10-18"


@pytest.mark.asyncio
async def test_register_twice_is_rejected(client: AsyncClient, user_headers, ab_passport):
    await client.post("/api/v1/devices", json=REGISTRATION, headers=user_headers)
    response = await client.post("/api/v1/devices", json=REGISTRATION, headers=user_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == {"error": "Device already registered", "kind": "AlreadyExists"}


@pytest.mark.asyncio
async def test_register_serial_without_passport(client: AsyncClient, user_headers, ab_passport):
    response = await client.post(
        "/api/v1/devices",
        json={**REGISTRATION, "serialNumber": "AB999"},
        headers=user_headers,
    )
    assert response.status_code == 400
    assert response.json()["detail"] == {"error": "Invalid serial number", "kind": "InvalidSerial"}


@pytest.mark.asyncio
async def test_register_requires_authentication(client: AsyncClient, ab_passport):
    response = await client.post("/api/v1/devices", json=REGISTRATION)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_anonymous_registration(anonymous_device):
    assert anonymous_device["ownerId"] is None
    assert anonymous_device["warrantyExpirationDate"] == "2026-10-18"


@pytest.mark.asyncio
async def test_anonymous_registration_requires_admin(client: AsyncClient, user_headers, ab_passport):
    response = await client.post("/api/v1/devices/anonymous", json=REGISTRATION, headers=user_headers)
    assert response.status_code == 403


# ── Ownership ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_claim_anonymous_device(client: AsyncClient, user_headers, anonymous_device):
    response = await client.put("/api/v1/devices/AB123/owner", headers=user_headers)
    assert response.status_code == 200
    assert response.json()["ownerId"] == 1
    assert response.json()["warrantyExpirationDate"] == "2027-10-18"

    again = await client.put("/api/v1/devices/AB123/owner", headers=user_headers)
    assert again.status_code == 400

    mine = await client.get("/api/v1/devices/mine", headers=user_headers)
    assert [d["serialNumber"] for d in mine.json()["items"]] == ["AB123"]


@pytest.mark.asyncio
async def test_claim_unregistered_device(client: AsyncClient, user_headers):
    response = await client.put("/api/v1/devices/AB123/owner", headers=user_headers)
    assert response.status_code == 404
    assert response.json()["detail"]["kind"] == "NotRegistered"


# ── Lookup, listing and maintenance ──────────────────────────────────


@pytest.mark.asyncio
async def test_get_device(client: AsyncClient, user_headers, anonymous_device):
    response = await client.get("/api/v1/devices/AB123", headers=user_headers)
    assert response.status_code == 200
    assert response.json()["serialNumber"] == "AB123"


@pytest.mark.asyncio
async def test_get_unknown_device(client: AsyncClient, user_headers):
    response = await client.get("/api/v1/devices/AB404", headers=user_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == {"error": "Device not found", "kind": "DeviceNotFound"}


@pytest.mark.asyncio
async def test_search_devices(client: AsyncClient, admin_headers, ab_passport):
    for serial in ("AB101", "AB102", "AB150"):
        await client.post(
            "/api/v1/devices/anonymous",
            json={**REGISTRATION, "serialNumber": serial},
            headers=admin_headers,
        )
    response = await client.get("/api/v1/devices?search=ab10", headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["totalItems"] == 2
    assert [d["serialNumber"] for d in body["items"]] == ["AB101", "AB102"]


@pytest.mark.asyncio
async def test_listing_all_devices_requires_admin(client: AsyncClient, user_headers):
    response = await client.get("/api/v1/devices", headers=user_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_update_device(client: AsyncClient, admin_headers, anonymous_device):
    response = await client.put(
        "/api/v1/devices/AB123",
        json={"registrationDate": "2026-01-01", "comment": "Screen replaced"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["comment"] == "Screen replaced"
    assert response.json()["warrantyExpirationDate"] == "2027-01-01"


@pytest.mark.asyncio
async def test_update_unknown_device(client: AsyncClient, admin_headers):
    response = await client.put(
        "/api/v1/devices/AB404",
        json={"registrationDate": "2026-01-01", "comment": None},
        headers=admin_headers,
    )
    assert response.status_code == 404


# ── Service history and deletion ─────────────────────────────────────


@pytest.mark.asyncio
async def test_renovation_lifecycle(client: AsyncClient, admin_headers, user_headers, anonymous_device):
    created = await client.post(
        "/api/v1/renovations",
        json={"serialNumber": "AB123", "description": "Changed filter", "renovationDate": "2025-10-18"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    renovation = created.json()
    assert renovation["deviceSerialNumber"] == "AB123"

    history = await client.get("/api/v1/devices/AB123/renovations", headers=user_headers)
    assert [r["description"] for r in history.json()] == ["Changed filter"]

    fetched = await client.get(f"/api/v1/renovations/{renovation['id']}", headers=user_headers)
    assert fetched.status_code == 200

    blocked = await client.delete("/api/v1/devices/AB123", headers=admin_headers)
    assert blocked.status_code == 400
    assert blocked.json()["detail"] == {
        "error": "Cannot delete device: renovations exist",
        "kind": "HasDependentRecords",
    }

    removed = await client.delete(f"/api/v1/renovations/{renovation['id']}", headers=admin_headers)
    assert removed.status_code == 204

    deleted = await client.delete("/api/v1/devices/AB123", headers=admin_headers)
    assert deleted.status_code == 204
    gone = await client.get("/api/v1/devices/AB123", headers=user_headers)
    assert gone.status_code == 404


@pytest.mark.asyncio
async def test_renovation_for_unregistered_device(client: AsyncClient, admin_headers):
    response = await client.post(
        "/api/v1/renovations",
        json={"serialNumber": "SN-001", "description": "Changed filter", "renovationDate": "2025-10-18"},
        headers=admin_headers,
    )
    assert response.status_code == 404
    assert response.json()["detail"] == {"error": "Device not registered", "kind": "NotRegistered"}


@pytest.mark.asyncio
async def test_missing_renovation(client: AsyncClient, user_headers):
    response = await client.get("/api/v1/renovations/999", headers=user_headers)
    assert response.status_code == 404
    assert response.json()["detail"]["kind"] == "EntityNotFound"


@pytest.mark.asyncio
async def test_delete_unknown_device_is_a_noop(client: AsyncClient, admin_headers):
    response = await client.delete("/api/v1/devices/AB404", headers=admin_headers)
    assert response.status_code == 204
