# app/models/application.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db import Base
from app.domain.enums import ApplicationStatus
from app.models.base import IdMixin, TimestampMixin

if TYPE_CHECKING:
    from app.models.job_listing import JobListing


class Application(IdMixin, TimestampMixin, Base):
    __tablename__ = "applications"

    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), index=True, nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    cv_url: Mapped[str] = mapped_column(String(2048), nullable=False)

    job_id: Mapped[str] = mapped_column(
        ForeignKey("job_listings.id", ondelete="RESTRICT"), index=True, nullable=False
    )

    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # staff only

    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ApplicationStatus.NEW.value, index=True
    )

    job: Mapped["JobListing"] = relationship("JobListing", back_populates="applications")

    def __repr__(self) -> str:
        return f"<Application id={self.id} job_id={self.job_id} status={self.status}>"

    @property
    def job_title(self):
        return self.job.title if self.job is not None else None
