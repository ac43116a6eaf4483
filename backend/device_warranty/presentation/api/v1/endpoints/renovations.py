"""Renovation (service history) endpoints."""

from fastapi import APIRouter, Depends, status

from device_warranty.application.schemas import RenovationCreate, RenovationResponse
from device_warranty.application.services import RenovationService
from device_warranty.domain.entities import Principal
from device_warranty.domain.exceptions import DomainError
from device_warranty.infrastructure.dependencies import (
    get_current_principal,
    get_renovation_service,
    require_admin,
)
from device_warranty.presentation.api.errors import http_error

router = APIRouter(tags=["Renovations"])


@router.post(
    "/renovations",
    response_model=RenovationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_renovation(
    data: RenovationCreate,
    _: Principal = Depends(require_admin),
    service: RenovationService = Depends(get_renovation_service),
) -> RenovationResponse:
    """Append a service record to a registered device."""
    try:
        renovation = await service.add_renovation(
            data.serial_number, data.description, data.renovation_date
        )
    except DomainError as e:
        raise http_error(e) from e
    return RenovationResponse.model_validate(renovation)


@router.get("/renovations/{renovation_id}", response_model=RenovationResponse)
async def get_renovation(
    renovation_id: int,
    _: Principal = Depends(get_current_principal),
    service: RenovationService = Depends(get_renovation_service),
) -> RenovationResponse:
    try:
        renovation = await service.get_renovation(renovation_id)
    except DomainError as e:
        raise http_error(e) from e
    return RenovationResponse.model_validate(renovation)


@router.get(
    "/devices/{serial_number}/renovations",
    response_model=list[RenovationResponse],
)
async def list_device_renovations(
    serial_number: str,
    _: Principal = Depends(get_current_principal),
    service: RenovationService = Depends(get_renovation_service),
) -> list[RenovationResponse]:
    try:
        renovations = await service.list_for_device(serial_number)
    except DomainError as e:
        raise http_error(e) from e
    return [RenovationResponse.model_validate(r) for r in renovations]


@router.delete("/renovations/{renovation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_renovation(
    renovation_id: int,
    _: Principal = Depends(require_admin),
    service: RenovationService = Depends(get_renovation_service),
) -> None:
    try:
        await service.delete_renovation(renovation_id)
    except DomainError as e:
        raise http_error(e) from e
