# app/core/rate_limit.py
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings

# One shared limiter for the whole app
limiter = Limiter(key_func=get_remote_address)

PUBLIC_LIMIT = f"{settings.rate_limit_public}/minute"
