# app/schemas/records.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict

from app.schemas.base import CamelModel


class RecordModel(CamelModel):
    model_config = ConfigDict(from_attributes=True)


class QuoteRequestOut(RecordModel):
    id: str
    first_name: str
    last_name: str
    email: str
    company: Optional[str] = None
    phone: Optional[str] = None
    service_type: Optional[str] = None
    urgency: Optional[str] = None
    description: str
    file_url: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime


class JobListingOut(RecordModel):
    id: str
    title: Any
    description: Any
    requirements: Optional[Any] = None
    department: str
    location: str
    job_type: str
    salary_range: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime


class ApplicationOut(RecordModel):
    id: str
    full_name: str
    email: str
    phone: str
    cv_url: str
    job_id: str
    job_title: Optional[Any] = None
    message: Optional[str] = None
    notes: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime


class ContactMessageOut(RecordModel):
    id: str
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime


class SiteSettingOut(RecordModel):
    site_name: str
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
