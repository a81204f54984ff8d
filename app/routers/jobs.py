# app/routers/jobs.py
from typing import List

from fastapi import APIRouter, Depends

from app.dependencies import get_listing_service, get_site_settings
from app.schemas.records import JobListingOut, SiteSettingOut
from app.services.listings import ListingService
from app.services.site_settings import SiteSettingsService

router = APIRouter(prefix="/api", tags=["public"])


@router.get("/jobs", response_model=List[JobListingOut])
def list_open_jobs(service: ListingService = Depends(get_listing_service)):
    """Job board: published listings only, newest first."""
    return service.published()


@router.get("/jobs/{job_id}", response_model=JobListingOut)
def get_open_job(job_id: str, service: ListingService = Depends(get_listing_service)):
    return service.get_published(job_id)


@router.get("/settings", response_model=SiteSettingOut)
def public_settings(service: SiteSettingsService = Depends(get_site_settings)):
    return service.get()
