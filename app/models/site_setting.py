# app/models/site_setting.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db import Base
from app.models.base import TimestampMixin

SINGLETON_ID = "singleton"


class SiteSetting(TimestampMixin, Base):
    __tablename__ = "site_settings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=SINGLETON_ID)

    site_name: Mapped[str] = mapped_column(String(200), default="MANA")
    address: Mapped[Optional[str]] = mapped_column(
        String(300), default="123 Industrial Zone, Agricultural District"
    )
    email: Mapped[Optional[str]] = mapped_column(String(320), default="contact@manaworkshops.com")
    phone: Mapped[Optional[str]] = mapped_column(String(50), default="+1 (234) 567-890")
    whatsapp: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # social
    facebook: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    linkedin: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    instagram: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # imagery
    logo_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    hero_image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    intro_image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # business hours
    business_hours_mon: Mapped[Optional[str]] = mapped_column(String(50), default="08:00 - 18:00")
    business_hours_tue: Mapped[Optional[str]] = mapped_column(String(50), default="08:00 - 18:00")
    business_hours_wed: Mapped[Optional[str]] = mapped_column(String(50), default="08:00 - 18:00")
    business_hours_thu: Mapped[Optional[str]] = mapped_column(String(50), default="08:00 - 18:00")
    business_hours_fri: Mapped[Optional[str]] = mapped_column(String(50), default="08:00 - 18:00")
    business_hours_sat: Mapped[Optional[str]] = mapped_column(String(50), default="09:00 - 13:00")
    business_hours_sun: Mapped[Optional[str]] = mapped_column(String(50), default="Closed")

    def __repr__(self) -> str:
        return f"<SiteSetting id={self.id} site_name={self.site_name!r}>"
