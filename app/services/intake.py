# app/services/intake.py
from __future__ import annotations

from typing import Any, Mapping

from app.core.errors import ListingNotOpen, NotFound, ValidationError
from app.core.logging_config import logger
from app.domain.enums import ApplicationStatus, JobStatus, QuoteStatus
from app.models import Application, ContactMessage, JobListing, QuoteRequest
from app.observability.metrics import intake_counter
from app.schemas.intake import ApplicationIn, ContactIn, QuoteRequestIn
from app.schemas.validation import parse_payload
from app.services.gateway import Gateway


class IntakeService:
    """
    The only way public submissions become records.

    Every handler validates the whole payload first and writes exactly once
    afterwards; a rejected payload never touches the gateway. Resubmitting
    the same form creates a second record.
    """

    def __init__(self, gateway: Gateway):
        self.gateway = gateway

    def _parse(self, kind: str, schema, payload: Mapping[str, Any]):
        try:
            return parse_payload(schema, payload)
        except ValidationError as e:
            intake_counter.labels(kind=kind, result="rejected").inc()
            logger.info("intake_rejected", kind=kind, fields=sorted(e.fields))
            raise

    def _created(self, kind: str, record) -> None:
        intake_counter.labels(kind=kind, result="created").inc()
        logger.info("intake_created", kind=kind, id=record.id)

    def submit_quote(self, payload: Mapping[str, Any]) -> QuoteRequest:
        data = self._parse("quote", QuoteRequestIn, payload)

        record = self.gateway.create(
            QuoteRequest,
            {
                "first_name": data.first_name,
                "last_name": data.last_name,
                "email": data.email,
                "company": data.company,
                "phone": data.phone,
                "service_type": data.service_type,
                "urgency": data.urgency,
                "description": data.description,
                "file_url": data.file_url,
                "status": QuoteStatus.NEW,
            },
        )
        self._created("quote", record)
        return record

    def submit_application(self, payload: Mapping[str, Any]) -> Application:
        data = self._parse("application", ApplicationIn, payload)

        listing = self.gateway.find_by_id(JobListing, data.job_id)
        if listing is None:
            intake_counter.labels(kind="application", result="rejected").inc()
            raise NotFound("JobListing", data.job_id)
        if listing.status != JobStatus.PUBLISHED.value:
            intake_counter.labels(kind="application", result="rejected").inc()
            logger.info("intake_rejected", kind="application", job_id=listing.id, job_status=listing.status)
            raise ListingNotOpen("This position is not open for applications")

        record = self.gateway.create(
            Application,
            {
                "full_name": data.full_name,
                "email": data.email,
                "phone": data.phone,
                "cv_url": data.cv_url,
                "job_id": listing.id,
                "message": data.message,
                "status": ApplicationStatus.NEW,
            },
        )
        self._created("application", record)
        return record

    def submit_contact(self, payload: Mapping[str, Any]) -> ContactMessage:
        data = self._parse("contact", ContactIn, payload)

        record = self.gateway.create(
            ContactMessage,
            {
                "name": data.name,
                "email": data.email,
                "subject": data.subject,
                "message": data.message,
            },
        )
        self._created("contact", record)
        return record
