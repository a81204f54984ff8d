# app/config.py
import os
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === General ===
    app_env: str = "local"  # local | development | production
    app_name: str = "workshop-intake"

    # === Database ===
    database_url: str = "sqlite:///./workshop.db"

    # === Blob storage ===
    storage_backend: str = Field("local", description="local | s3")
    local_storage_path: str = "data/files"
    public_base_url: str = "http://localhost:8000"
    s3_bucket: Optional[str] = Field(None, description="Bucket for uploaded attachments")
    s3_region: str = "eu-west-1"
    s3_prefix: str = "uploads/"

    # === Uploads ===
    upload_max_bytes: int = 10 * 1024 * 1024  # 10 MiB
    upload_allowed_extensions: str = "pdf,jpg,jpeg,png"

    # === Intake ===
    quote_description_min_length: int = 20

    # === Logging ===
    log_level: str = "INFO"

    # === HTTP ===
    allowed_origins: list[str] = ["http://localhost:3000"]
    rate_limit_public: int = 20  # per minute per client

    # === Metrics ===
    metrics_enabled: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def allowed_extensions(self) -> set[str]:
        return {
            e.strip().lower().lstrip(".")
            for e in self.upload_allowed_extensions.split(",")
            if e.strip()
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton Settings instance with simple environment overrides."""
    s = Settings()

    env = os.getenv("ENVIRONMENT", s.app_env).lower()
    if env == "production":
        s.log_level = "WARNING"
        s.rate_limit_public = 10
    elif env == "development":
        s.log_level = "DEBUG"
        s.rate_limit_public = 60

    return s


# Module-level export so `from app.config import settings` keeps working
settings = get_settings()
