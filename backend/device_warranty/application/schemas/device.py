"""Pydantic DTOs for the Device feature."""

from datetime import date

from pydantic import Field

from .common import CamelModel


class DeviceCreate(CamelModel):
    """Schema for registering a device by serial number."""

    serial_number: str = Field(..., min_length=1, max_length=100, examples=["AB123"])
    registration_date: date = Field(..., examples=["2025-10-18"])


class DeviceUpdate(CamelModel):
    registration_date: date
    comment: str | None = Field(None, max_length=2000)


class DeviceResponse(CamelModel):
    """Schema returned to the client."""

    serial_number: str
    registration_date: date
    warranty_expiration_date: date
    warranty_months: int
    comment: str | None
    owner_id: int | None
    passport_id: int | None
