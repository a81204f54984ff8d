# Models package: importing it registers every table on Base.metadata

from .application import Application
from .contact_message import ContactMessage
from .job_listing import JobListing
from .quote_request import QuoteRequest
from .site_setting import SiteSetting

__all__ = [
    "Application",
    "ContactMessage",
    "JobListing",
    "QuoteRequest",
    "SiteSetting",
]
