"""Device endpoints — registration, ownership and warranty maintenance."""

from fastapi import APIRouter, Depends, Query, status

from device_warranty.application.schemas import (
    DeviceCreate,
    DeviceResponse,
    DeviceUpdate,
    PageResponse,
)
from device_warranty.application.services import DeviceService
from device_warranty.domain.entities import Device, Page, Principal
from device_warranty.domain.exceptions import DeviceNotFoundError, DomainError
from device_warranty.infrastructure.dependencies import (
    get_current_principal,
    get_device_service,
    require_admin,
)
from device_warranty.presentation.api.errors import http_error
from device_warranty.presentation.api.pagination import resolve_page_size

router = APIRouter(prefix="/devices", tags=["Devices"])


def _to_page_response(result: Page[Device]) -> PageResponse[DeviceResponse]:
    return PageResponse[DeviceResponse](
        items=[DeviceResponse.model_validate(d) for d in result.items],
        current_page=result.current_page,
        total_pages=result.total_pages,
        total_items=result.total_items,
    )


@router.get("", response_model=PageResponse[DeviceResponse])
async def list_devices(
    search: str | None = Query(None, description="Case-insensitive serial substring"),
    page: int = Query(1, ge=1),
    size: int | None = Query(None, ge=1),
    _: Principal = Depends(require_admin),
    service: DeviceService = Depends(get_device_service),
) -> PageResponse[DeviceResponse]:
    """Retrieve a filtered, paginated list of all devices."""
    try:
        result = await service.list_devices(
            search=search, page=page, size=resolve_page_size(size)
        )
    except DomainError as e:
        raise http_error(e) from e
    return _to_page_response(result)


@router.get("/mine", response_model=PageResponse[DeviceResponse])
async def list_my_devices(
    page: int = Query(1, ge=1),
    size: int | None = Query(None, ge=1),
    principal: Principal = Depends(get_current_principal),
    service: DeviceService = Depends(get_device_service),
) -> PageResponse[DeviceResponse]:
    """Devices owned by the authenticated caller."""
    try:
        result = await service.list_owner_devices(
            principal.user_id, page=page, size=resolve_page_size(size)
        )
    except DomainError as e:
        raise http_error(e) from e
    return _to_page_response(result)


@router.get("/{serial_number}", response_model=DeviceResponse)
async def get_device(
    serial_number: str,
    _: Principal = Depends(get_current_principal),
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    try:
        device = await service.find_device(serial_number)
    except DomainError as e:
        raise http_error(e) from e
    if device is None:
        raise http_error(DeviceNotFoundError(serial_number))
    return DeviceResponse.model_validate(device)


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
async def register_device(
    data: DeviceCreate,
    principal: Principal = Depends(get_current_principal),
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    """Register a new device owned by the caller (doubled warranty)."""
    try:
        device = await service.register_new_device(
            data.serial_number, data.registration_date, principal.user_id
        )
    except DomainError as e:
        raise http_error(e) from e
    return DeviceResponse.model_validate(device)


@router.post("/anonymous", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
async def add_anonymous_device(
    data: DeviceCreate,
    _: Principal = Depends(require_admin),
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    """Register a walk-in device without an owner."""
    try:
        device = await service.add_anonymous_device(data.serial_number, data.registration_date)
    except DomainError as e:
        raise http_error(e) from e
    return DeviceResponse.model_validate(device)


@router.put("/{serial_number}/owner", response_model=DeviceResponse)
async def claim_device(
    serial_number: str,
    principal: Principal = Depends(get_current_principal),
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    """Attach the caller as owner of an anonymous device."""
    try:
        device = await service.attach_owner(serial_number, principal.user_id)
    except DomainError as e:
        raise http_error(e) from e
    return DeviceResponse.model_validate(device)


@router.put("/{serial_number}", response_model=DeviceResponse)
async def update_device(
    serial_number: str,
    data: DeviceUpdate,
    _: Principal = Depends(require_admin),
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    """Change registration date and comment; the expiration is recomputed."""
    try:
        device = await service.update_device(
            serial_number, data.registration_date, data.comment
        )
    except DomainError as e:
        raise http_error(e) from e
    return DeviceResponse.model_validate(device)


@router.delete("/{serial_number}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_device(
    serial_number: str,
    _: Principal = Depends(require_admin),
    service: DeviceService = Depends(get_device_service),
) -> None:
    try:
        await service.delete_device(serial_number)
    except DomainError as e:
        raise http_error(e) from e
