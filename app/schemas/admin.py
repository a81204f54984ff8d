# app/schemas/admin.py
from __future__ import annotations

from typing import Dict, Optional, Union

from pydantic import ConfigDict, Field, field_validator

from app.domain.enums import ApplicationStatus, JobStatus, JobType, QuoteStatus
from app.schemas.base import CamelModel, blank_to_none

# plain string or {"en": "...", "fr": "..."}
LocalizedText = Union[str, Dict[str, str]]


def _check_localized(v: Optional[LocalizedText]) -> Optional[LocalizedText]:
    if v is None:
        return v
    if isinstance(v, str):
        if not v.strip():
            raise ValueError("Must not be empty")
        return v.strip()
    if not any(text.strip() for text in v.values()):
        raise ValueError("At least one language must have content")
    return v


class JobListingCreate(CamelModel):
    title: LocalizedText
    description: LocalizedText
    requirements: Optional[LocalizedText] = None
    department: str = Field(..., min_length=1, max_length=100)
    location: Optional[str] = Field(None, max_length=200)
    job_type: JobType = JobType.FULL_TIME
    salary_range: Optional[str] = Field(None, max_length=100)
    status: JobStatus = JobStatus.DRAFT

    blank_optional = field_validator("location", "salary_range", mode="before")(blank_to_none)
    localized = field_validator("title", "description", "requirements")(_check_localized)

    @field_validator("status")
    @classmethod
    def validate_initial_status(cls, v: JobStatus) -> JobStatus:
        if v == JobStatus.ARCHIVED:
            raise ValueError("A new listing starts as DRAFT or PUBLISHED")
        return v


class JobListingUpdate(CamelModel):
    """Content edit; ``status`` goes through the lifecycle rules."""

    title: Optional[LocalizedText] = None
    description: Optional[LocalizedText] = None
    requirements: Optional[LocalizedText] = None
    department: Optional[str] = Field(None, min_length=1, max_length=100)
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    job_type: Optional[JobType] = None
    salary_range: Optional[str] = Field(None, max_length=100)
    status: Optional[JobStatus] = None

    localized = field_validator("title", "description", "requirements")(_check_localized)


class ApplicationUpdate(CamelModel):
    status: Optional[ApplicationStatus] = None
    notes: Optional[str] = Field(None, max_length=10000)


class QuoteStatusUpdate(CamelModel):
    status: QuoteStatus


class SiteSettingUpdate(CamelModel):
    """Only these keys may be changed; anything else in the body is dropped."""

    model_config = ConfigDict(extra="ignore")

    site_name: Optional[str] = Field(None, min_length=1, max_length=200)
    address: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None
    logo_url: Optional[str] = None
    hero_image_url: Optional[str] = None
    intro_image_url: Optional[str] = None
    business_hours_mon: Optional[str] = None
    business_hours_tue: Optional[str] = None
    business_hours_wed: Optional[str] = None
    business_hours_thu: Optional[str] = None
    business_hours_fri: Optional[str] = None
    business_hours_sat: Optional[str] = None
    business_hours_sun: Optional[str] = None
