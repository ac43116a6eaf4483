"""Passport endpoints — registration is admin-only, resolution is public."""

from fastapi import APIRouter, Depends, Query, status

from device_warranty.application.schemas import (
    PageResponse,
    PassportCreate,
    PassportResponse,
    PassportUpdate,
)
from device_warranty.application.services import PassportResolver, PassportService
from device_warranty.domain.entities import Principal
from device_warranty.domain.exceptions import DomainError
from device_warranty.infrastructure.dependencies import (
    get_current_principal,
    get_passport_resolver,
    get_passport_service,
    require_admin,
)
from device_warranty.presentation.api.errors import http_error
from device_warranty.presentation.api.pagination import resolve_page_size

router = APIRouter(prefix="/passports", tags=["Passports"])


@router.get("", response_model=PageResponse[PassportResponse])
async def list_passports(
    page: int = Query(1, ge=1),
    size: int | None = Query(None, ge=1),
    _: Principal = Depends(get_current_principal),
    service: PassportService = Depends(get_passport_service),
) -> PageResponse[PassportResponse]:
    """Retrieve a paginated list of passports."""
    try:
        result = await service.list_passports(page=page, size=resolve_page_size(size))
    except DomainError as e:
        raise http_error(e) from e
    return PageResponse[PassportResponse](
        items=[PassportResponse.model_validate(p) for p in result.items],
        current_page=result.current_page,
        total_pages=result.total_pages,
        total_items=result.total_items,
    )


@router.get("/by-serial/{serial_number}", response_model=PassportResponse)
async def resolve_passport(
    serial_number: str,
    resolver: PassportResolver = Depends(get_passport_resolver),
) -> PassportResponse:
    """Resolve the passport governing a serial number."""
    try:
        passport = await resolver.resolve(serial_number)
    except DomainError as e:
        raise http_error(e) from e
    return PassportResponse.model_validate(passport)


@router.get("/by-prefix/{serial}", response_model=list[PassportResponse])
async def list_by_prefix(
    serial: str,
    _: Principal = Depends(get_current_principal),
    service: PassportService = Depends(get_passport_service),
) -> list[PassportResponse]:
    """All passports whose prefix matches the start of ``serial``."""
    try:
        passports = await service.list_by_serial_prefix(serial)
    except DomainError as e:
        raise http_error(e) from e
    return [PassportResponse.model_validate(p) for p in passports]


@router.get("/{passport_id}", response_model=PassportResponse)
async def get_passport(
    passport_id: int,
    _: Principal = Depends(get_current_principal),
    service: PassportService = Depends(get_passport_service),
) -> PassportResponse:
    try:
        passport = await service.get_passport(passport_id)
    except DomainError as e:
        raise http_error(e) from e
    return PassportResponse.model_validate(passport)


@router.post("", response_model=PassportResponse, status_code=status.HTTP_201_CREATED)
async def create_passport(
    data: PassportCreate,
    _: Principal = Depends(require_admin),
    service: PassportService = Depends(get_passport_service),
) -> PassportResponse:
    """Register a passport; its range must not overlap another with the same prefix."""
    try:
        passport = await service.create_passport(data)
    except DomainError as e:
        raise http_error(e) from e
    return PassportResponse.model_validate(passport)


@router.put("/{passport_id}", response_model=PassportResponse)
async def update_passport(
    passport_id: int,
    data: PassportUpdate,
    _: Principal = Depends(require_admin),
    service: PassportService = Depends(get_passport_service),
) -> PassportResponse:
    try:
        passport = await service.update_passport(passport_id, data)
    except DomainError as e:
        raise http_error(e) from e
    return PassportResponse.model_validate(passport)


@router.delete("/{passport_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_passport(
    passport_id: int,
    _: Principal = Depends(require_admin),
    service: PassportService = Depends(get_passport_service),
) -> None:
    """Delete a passport. Devices bound to it are left untouched."""
    try:
        await service.delete_passport(passport_id)
    except DomainError as e:
        raise http_error(e) from e
