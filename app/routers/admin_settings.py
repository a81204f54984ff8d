# app/routers/admin_settings.py
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from app.dependencies import get_site_settings
from app.schemas.records import SiteSettingOut
from app.services.site_settings import SiteSettingsService

router = APIRouter(prefix="/api/admin", tags=["admin", "settings"])


@router.get("/settings", response_model=SiteSettingOut)
def get_settings(service: SiteSettingsService = Depends(get_site_settings)):
    return service.get()


@router.patch("/settings", response_model=SiteSettingOut)
def update_settings(
    payload: Dict[str, Any] = Body(...),
    service: SiteSettingsService = Depends(get_site_settings),
):
    return service.update(payload)
