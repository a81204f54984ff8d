# app/services/listings.py
from __future__ import annotations

from typing import Any, List, Mapping

from app.core.errors import ConflictError, NotFound
from app.core.logging_config import logger
from app.domain.enums import JobStatus
from app.models import Application, JobListing
from app.models.job_listing import DEFAULT_LOCATION
from app.schemas.admin import JobListingCreate, JobListingUpdate
from app.schemas.validation import parse_payload
from app.services.gateway import Gateway
from app.workflow.status import LifecycleManager

NULLABLE_FIELDS = {"requirements", "salary_range"}


class ListingService:
    """Staff-side job listing management plus the public job board reads."""

    def __init__(self, gateway: Gateway, lifecycle: LifecycleManager | None = None):
        self.gateway = gateway
        self.lifecycle = lifecycle or LifecycleManager(gateway)

    # --- public ---------------------------------------------------------
    def published(self) -> List[JobListing]:
        return self.gateway.find_many(
            JobListing,
            {"status": JobStatus.PUBLISHED},
            order_by=[JobListing.created_at.desc()],
        )

    def get_published(self, job_id: str) -> JobListing:
        listing = self.gateway.find_by_id(JobListing, job_id)
        if listing is None or listing.status != JobStatus.PUBLISHED.value:
            raise NotFound("JobListing", job_id)
        return listing

    # --- staff ----------------------------------------------------------
    def all(self) -> List[JobListing]:
        return self.gateway.find_many(JobListing, order_by=[JobListing.created_at.desc()])

    def get(self, job_id: str) -> JobListing:
        return self.gateway.require(JobListing, job_id)

    def create(self, payload: Mapping[str, Any]) -> JobListing:
        data = parse_payload(JobListingCreate, payload)
        listing = self.gateway.create(
            JobListing,
            {
                "title": data.title,
                "description": data.description,
                "requirements": data.requirements,
                "department": data.department,
                "location": data.location or DEFAULT_LOCATION,
                "job_type": data.job_type,
                "salary_range": data.salary_range,
                "status": data.status,
            },
        )
        logger.info("job_listing_created", id=listing.id, status=listing.status)
        return listing

    def update(self, job_id: str, payload: Mapping[str, Any]) -> JobListing:
        data = parse_payload(JobListingUpdate, payload)

        fields = data.model_dump(exclude_unset=True, exclude={"status"})
        # only requirements and salary range may be cleared
        fields = {
            k: v for k, v in fields.items() if v is not None or k in NULLABLE_FIELDS
        }

        listing = self.lifecycle.edit_job(job_id, data.status, fields)
        logger.info("job_listing_updated", id=job_id, fields=sorted(fields), status=listing.status)
        return listing

    def delete(self, job_id: str) -> None:
        self.gateway.require(JobListing, job_id)
        pending = self.gateway.count(Application, {"job_id": job_id})
        if pending:
            logger.info("job_listing_delete_refused", id=job_id, applications=pending)
            raise ConflictError(
                f"Listing has {pending} application(s); archive it instead of deleting"
            )
        self.gateway.delete(JobListing, job_id)
        logger.info("job_listing_deleted", id=job_id)
