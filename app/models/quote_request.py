# app/models/quote_request.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db import Base
from app.domain.enums import QuoteStatus
from app.models.base import IdMixin, TimestampMixin


class QuoteRequest(IdMixin, TimestampMixin, Base):
    __tablename__ = "quote_requests"

    # contact
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(320), index=True, nullable=False)
    company: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # project
    service_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    urgency: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    file_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)

    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=QuoteStatus.NEW.value, index=True
    )

    def __repr__(self) -> str:
        return f"<QuoteRequest id={self.id} email={self.email!r} status={self.status}>"
