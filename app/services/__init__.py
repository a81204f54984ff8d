# Services package
# ListingService lives in .listings; it depends on app.workflow, which imports this package.

from .gateway import Gateway
from .intake import IntakeService
from .site_settings import SiteSettingsService
from .storage import Storage, get_storage
from .upload_guard import UploadGuard

__all__ = [
    "Gateway",
    "IntakeService",
    "SiteSettingsService",
    "Storage",
    "UploadGuard",
    "get_storage",
]
