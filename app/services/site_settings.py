# app/services/site_settings.py
from __future__ import annotations

from typing import Any, Mapping

from app.core.logging_config import logger
from app.models import SiteSetting
from app.models.site_setting import SINGLETON_ID
from app.schemas.admin import SiteSettingUpdate
from app.schemas.validation import parse_payload
from app.services.gateway import Gateway


class SiteSettingsService:
    """One row of site-wide settings, created with defaults on first read."""

    def __init__(self, gateway: Gateway):
        self.gateway = gateway

    def get(self) -> SiteSetting:
        current = self.gateway.find_by_id(SiteSetting, SINGLETON_ID)
        if current is None:
            current = self.gateway.create(SiteSetting, {"id": SINGLETON_ID})
            logger.info("site_settings_initialized")
        return current

    def update(self, payload: Mapping[str, Any]) -> SiteSetting:
        # unknown keys are dropped by the schema
        data = parse_payload(SiteSettingUpdate, payload)
        fields = data.model_dump(exclude_unset=True)
        if fields.get("site_name", "") is None:
            fields.pop("site_name")
        self.get()
        if not fields:
            return self.get()
        updated = self.gateway.update(SiteSetting, SINGLETON_ID, fields)
        logger.info("site_settings_updated", fields=sorted(fields))
        return updated
