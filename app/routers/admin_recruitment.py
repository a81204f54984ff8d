# app/routers/admin_recruitment.py
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from app.dependencies import get_gateway, get_lifecycle, get_listing_service
from app.domain.enums import ApplicationStatus
from app.models import Application
from app.schemas.admin import ApplicationUpdate
from app.schemas.records import ApplicationOut, JobListingOut
from app.schemas.validation import parse_payload
from app.services.gateway import Gateway
from app.services.listings import ListingService
from app.workflow.status import LifecycleManager

router = APIRouter(prefix="/api/admin", tags=["admin", "recruitment"])


# ----------------------------------------------------
# Job listings
# ----------------------------------------------------
@router.get("/jobs", response_model=List[JobListingOut])
def list_jobs(service: ListingService = Depends(get_listing_service)):
    return service.all()


@router.post("/jobs", response_model=JobListingOut, status_code=201)
def create_job(
    payload: Dict[str, Any] = Body(...),
    service: ListingService = Depends(get_listing_service),
):
    return service.create(payload)


@router.get("/jobs/{job_id}", response_model=JobListingOut)
def get_job(job_id: str, service: ListingService = Depends(get_listing_service)):
    return service.get(job_id)


@router.patch("/jobs/{job_id}", response_model=JobListingOut)
def update_job(
    job_id: str,
    payload: Dict[str, Any] = Body(...),
    service: ListingService = Depends(get_listing_service),
):
    return service.update(job_id, payload)


@router.delete("/jobs/{job_id}")
def delete_job(job_id: str, service: ListingService = Depends(get_listing_service)):
    service.delete(job_id)
    return {"success": True}


# ----------------------------------------------------
# Applications
# ----------------------------------------------------
@router.get("/applications", response_model=List[ApplicationOut])
def list_applications(
    status: Optional[ApplicationStatus] = Query(None),
    job_id: Optional[str] = Query(None, alias="jobId"),
    gateway: Gateway = Depends(get_gateway),
):
    filters: Dict[str, Any] = {}
    if status is not None:
        filters["status"] = status
    if job_id:
        filters["job_id"] = job_id
    return gateway.find_many(Application, filters, order_by=[Application.created_at.desc()])


@router.get("/applications/{application_id}", response_model=ApplicationOut)
def get_application(application_id: str, gateway: Gateway = Depends(get_gateway)):
    return gateway.require(Application, application_id)


@router.patch("/applications/{application_id}", response_model=ApplicationOut)
def update_application(
    application_id: str,
    payload: Dict[str, Any] = Body(...),
    lifecycle: LifecycleManager = Depends(get_lifecycle),
):
    data = parse_payload(ApplicationUpdate, payload)
    changes = {"notes": data.notes} if "notes" in data.model_fields_set else {}
    return lifecycle.edit_application(application_id, data.status, changes)


@router.delete("/applications/{application_id}")
def delete_application(application_id: str, gateway: Gateway = Depends(get_gateway)):
    gateway.delete(Application, application_id)
    return {"success": True}
