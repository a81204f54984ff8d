# app/dependencies.py
from __future__ import annotations

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db import get_db
from app.services.gateway import Gateway
from app.services.intake import IntakeService
from app.services.listings import ListingService
from app.services.site_settings import SiteSettingsService
from app.services.storage import Storage, get_storage
from app.services.upload_guard import UploadGuard
from app.workflow.status import LifecycleManager


@lru_cache(maxsize=1)
def get_storage_service() -> Storage:
    """One storage backend per process (S3 client or local directory)."""
    return get_storage()


def get_gateway(db: Session = Depends(get_db)) -> Gateway:
    return Gateway(db)


def get_upload_guard(storage: Storage = Depends(get_storage_service)) -> UploadGuard:
    return UploadGuard(storage)


def get_intake_service(gateway: Gateway = Depends(get_gateway)) -> IntakeService:
    return IntakeService(gateway)


def get_lifecycle(gateway: Gateway = Depends(get_gateway)) -> LifecycleManager:
    return LifecycleManager(gateway)


def get_listing_service(
    gateway: Gateway = Depends(get_gateway),
    lifecycle: LifecycleManager = Depends(get_lifecycle),
) -> ListingService:
    return ListingService(gateway, lifecycle)


def get_site_settings(gateway: Gateway = Depends(get_gateway)) -> SiteSettingsService:
    return SiteSettingsService(gateway)
