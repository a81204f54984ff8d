# app/schemas/intake.py
"""
Input contracts for the public forms.

Each model is the complete rule set for one submission type; handlers only
persist what one of these models produced. ``QuoteRequestIn`` reads the
description minimum from settings so the rule can be tuned per deployment.
"""
from __future__ import annotations

from typing import Annotated, Optional

from pydantic import AfterValidator, AnyHttpUrl, EmailStr, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from app.config import settings
from app.domain.enums import ServiceType, Urgency
from app.schemas.base import CamelModel, blank_to_none

# digits, spaces, + prefix and the usual separators
PHONE_PATTERN = r"^\+?[0-9\s().\-/]{5,25}$"

_http_url = TypeAdapter(AnyHttpUrl)


def _check_http_url(v: str) -> str:
    # validated as a URL but stored exactly as submitted (no normalizing)
    try:
        _http_url.validate_python(v)
    except PydanticValidationError:
        raise ValueError("Must be a valid http(s) URL") from None
    return v


HttpUrlStr = Annotated[str, Field(max_length=2048), AfterValidator(_check_http_url)]


class QuoteRequestIn(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    company: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)

    service_type: ServiceType
    urgency: Urgency
    description: str
    file_url: Optional[HttpUrlStr] = None

    blank_optional = field_validator("company", "phone", "file_url", mode="before")(blank_to_none)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        minimum = settings.quote_description_min_length
        if len(v) < minimum:
            raise ValueError(f"Please describe the job in at least {minimum} characters")
        return v


class ApplicationIn(CamelModel):
    full_name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: str = Field(..., min_length=1, pattern=PHONE_PATTERN)
    cv_url: HttpUrlStr
    job_id: str = Field(..., min_length=1, max_length=36)
    message: Optional[str] = Field(None, max_length=5000)

    blank_optional = field_validator("message", mode="before")(blank_to_none)


class ContactIn(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=300)
    message: str = Field(..., min_length=1, max_length=5000)


class IntakeResponse(CamelModel):
    success: bool = True
    id: str
