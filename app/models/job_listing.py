# app/models/job_listing.py
from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db import Base
from app.domain.enums import JobStatus, JobType
from app.models.base import IdMixin, TimestampMixin

if TYPE_CHECKING:
    from app.models.application import Application

DEFAULT_LOCATION = "Workshop"


class JobListing(IdMixin, TimestampMixin, Base):
    __tablename__ = "job_listings"

    # localized content, e.g. {"en": "...", "fr": "..."}
    title: Mapped[Any] = mapped_column(JSON, nullable=False)
    description: Mapped[Any] = mapped_column(JSON, nullable=False)
    requirements: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)

    department: Mapped[str] = mapped_column(String(100), nullable=False)
    location: Mapped[str] = mapped_column(
        String(200), nullable=False, default=DEFAULT_LOCATION
    )
    job_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=JobType.FULL_TIME.value
    )
    salary_range: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=JobStatus.DRAFT.value, index=True
    )

    # no cascade: a listing with applications cannot be deleted
    applications: Mapped[List["Application"]] = relationship(
        "Application",
        back_populates="job",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"<JobListing id={self.id} department={self.department!r} status={self.status}>"
