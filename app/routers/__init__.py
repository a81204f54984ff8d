# Routers package

from . import admin_inbox, admin_recruitment, admin_settings, files, intake, jobs, uploads

__all__ = [
    "admin_inbox",
    "admin_recruitment",
    "admin_settings",
    "files",
    "intake",
    "jobs",
    "uploads",
]
