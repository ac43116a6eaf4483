"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from device_warranty.presentation.api.v1.endpoints.health import router as health_router
from device_warranty.presentation.api.v1.endpoints.passports import router as passports_router
from device_warranty.presentation.api.v1.endpoints.devices import router as devices_router
from device_warranty.presentation.api.v1.endpoints.renovations import router as renovations_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(passports_router)
router.include_router(devices_router)
router.include_router(renovations_router)
