"""Pydantic DTOs for the Renovation feature."""

from datetime import date

from pydantic import Field

from .common import CamelModel


class RenovationCreate(CamelModel):
    serial_number: str = Field(..., min_length=1, max_length=100, examples=["SN-001"])
    description: str = Field(..., min_length=1, examples=["Changed filter"])
    renovation_date: date = Field(..., examples=["2025-10-18"])


class RenovationResponse(CamelModel):
    id: int
    description: str
    renovation_date: date
    device_serial_number: str
