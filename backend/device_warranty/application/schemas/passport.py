"""Pydantic DTOs (Data Transfer Objects) for the Passport feature."""

from datetime import datetime

from pydantic import Field, model_validator

from .common import CamelModel

# Largest value a BIGINT serial bound column holds
MAX_SERIAL_NUMBER = 2**63 - 1


class PassportCreate(CamelModel):
    """Schema for registering a new passport."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Passport A"])
    model: str = Field(..., min_length=1, max_length=255, examples=["ModelX"])
    serial_prefix: str = Field(..., min_length=1, max_length=50, examples=["PA"])
    warranty_months: int = Field(..., gt=0, examples=[12])
    from_serial_number: int = Field(..., ge=0, le=MAX_SERIAL_NUMBER, examples=[100])
    to_serial_number: int = Field(..., ge=0, le=MAX_SERIAL_NUMBER, examples=[200])

    @model_validator(mode="after")
    def _check_range(self):
        if self.from_serial_number > self.to_serial_number:
            raise ValueError("fromSerialNumber must not be greater than toSerialNumber")
        return self


class PassportUpdate(PassportCreate):
    """Schema for updating a passport — every term is replaced."""


class PassportResponse(CamelModel):
    """Schema returned to the client."""

    id: int
    name: str
    model: str
    serial_prefix: str
    warranty_months: int
    from_serial_number: int
    to_serial_number: int
    created_at: datetime
    updated_at: datetime
