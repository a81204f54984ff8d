# app/domain/enums.py
from __future__ import annotations

import enum


class QuoteStatus(str, enum.Enum):
    NEW = "new"
    IN_REVIEW = "in-review"
    QUOTED = "quoted"
    CLOSED = "closed"


class JobStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


class JobType(str, enum.Enum):
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACT = "CONTRACT"
    INTERNSHIP = "INTERNSHIP"
    TEMPORARY = "TEMPORARY"


class ApplicationStatus(str, enum.Enum):
    NEW = "NEW"
    REVIEWING = "REVIEWING"
    INTERVIEW = "INTERVIEW"
    OFFER = "OFFER"
    REJECTED = "REJECTED"
    HIRED = "HIRED"


class ServiceType(str, enum.Enum):
    MACHINING = "Machining"
    REPAIR = "Repair"
    FABRICATION = "Fabrication"
    MODIFICATION = "Modification"
    OTHER = "Other"


class Urgency(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"
