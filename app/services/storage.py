# app/services/storage.py
import mimetypes
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path, PurePath
from typing import Optional
from uuid import uuid4

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.config import Settings, settings as default_settings
from app.core.errors import GatewayError
from app.core.logging_config import logger


# =========================
# Key helpers
# =========================
def safe_filename(name: str) -> str:
    """Make a filename URL/FS-safe."""
    name = PurePath(name.replace("\\", "/")).name  # strip path
    cleaned = "".join(ch if ch.isalnum() or ch in (".", "-", "_") else "_" for ch in name)
    return cleaned.lstrip(".") or "file"


def make_key(prefix: str, filename: str) -> str:
    """
    Example: 'uploads/2026-10-19/550e8400.../drawing.pdf'
    """
    today = datetime.now(timezone.utc).date().isoformat()
    return f"{prefix}{today}/{uuid4().hex}/{safe_filename(filename)}"


def guess_content_type(filename: str) -> str:
    ctype, _ = mimetypes.guess_type(filename)
    return ctype or "application/octet-stream"


def _basic_key_checks(key: str) -> Optional[str]:
    """Path validation against traversal/abuse."""
    if not key:
        return "empty_key"
    if key.startswith("/") or key.endswith("/"):
        return "bad_slashes"
    if ".." in key.split("/"):
        return "path_traversal"
    return None


# =========================
# Abstract Storage
# =========================
class Storage(ABC):
    """Blob storage: accepts bytes, hands back a public URL."""

    def __init__(self, prefix: str = "uploads/"):
        self.prefix = prefix

    @abstractmethod
    def save_bytes(self, key: str, data: bytes, content_type: str) -> None:
        """Write bytes under the given key."""

    @abstractmethod
    def public_url(self, key: str) -> str:
        """Public URL for a stored key."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check whether a key exists."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove a key; False when nothing was removed."""

    def store(self, data: bytes, filename: str, content_type: Optional[str] = None) -> str:
        key = make_key(self.prefix, filename)
        self.save_bytes(key, data, content_type or guess_content_type(filename))
        return self.public_url(key)


# =========================
# Local Storage
# =========================
class LocalStorage(Storage):
    """Local disk storage, served back through GET /files/{key}."""

    def __init__(self, base_path: str = "data/files", base_url: str = "", prefix: str = "uploads/"):
        super().__init__(prefix)
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)
        self.base_url = base_url.rstrip("/")

    def path_for(self, key: str) -> Path:
        err = _basic_key_checks(key)
        if err:
            raise ValueError(err)
        return self.base_path / key

    def save_bytes(self, key: str, data: bytes, content_type: str) -> None:
        file_path = self.path_for(key)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, "wb") as f:
                f.write(data)
        except OSError as e:
            logger.error("local_store_failed", key=key, error=str(e))
            raise GatewayError(detail=str(e)) from e
        logger.info("file_stored", backend="local", key=key, size=len(data))

    def public_url(self, key: str) -> str:
        return f"{self.base_url}/files/{key}"

    def exists(self, key: str) -> bool:
        try:
            return self.path_for(key).is_file()
        except ValueError:
            return False

    def delete(self, key: str) -> bool:
        try:
            p = self.path_for(key)
        except ValueError:
            return False
        if p.exists():
            p.unlink()
            logger.info("file_deleted", backend="local", key=key)
            return True
        return False


# =========================
# S3 Storage
# =========================
class S3Storage(Storage):
    """Amazon S3 storage (credentials from IAM role / profile)."""

    def __init__(self, bucket: str, region: str = "eu-west-1", prefix: str = "uploads/", client=None):
        super().__init__(prefix)
        self.bucket = bucket
        self.region = region
        self.s3_client = client or boto3.client(
            "s3",
            config=Config(
                region_name=region,
                retries={"max_attempts": 5, "mode": "standard"},
                connect_timeout=3,
                read_timeout=10,
            ),
        )

    def save_bytes(self, key: str, data: bytes, content_type: str) -> None:
        try:
            self.s3_client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("s3_store_failed", bucket=self.bucket, key=key, error=str(e))
            raise GatewayError(detail=str(e)) from e
        logger.info("file_stored", backend="s3", bucket=self.bucket, key=key, size=len(data))

    def public_url(self, key: str) -> str:
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    def exists(self, key: str) -> bool:
        try:
            self.s3_client.head_object(Bucket=self.bucket, Key=key)
            return True
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            if code in ("404", "NotFound", "NoSuchKey"):
                return False
            raise GatewayError(detail=str(e)) from e

    def delete(self, key: str) -> bool:
        try:
            self.s3_client.delete_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            logger.error("s3_delete_failed", bucket=self.bucket, key=key, error=str(e))
            return False
        logger.info("file_deleted", backend="s3", bucket=self.bucket, key=key)
        return True


# =========================
# Factory
# =========================
def get_storage(cfg: Optional[Settings] = None) -> Storage:
    """Return the storage backend selected in settings."""
    cfg = cfg or default_settings
    backend = cfg.storage_backend.lower()

    if backend == "s3":
        if not cfg.s3_bucket:
            raise ValueError("S3_BUCKET is required for the s3 storage backend")
        return S3Storage(bucket=cfg.s3_bucket, region=cfg.s3_region, prefix=cfg.s3_prefix)

    if backend == "local":
        return LocalStorage(
            base_path=cfg.local_storage_path,
            base_url=cfg.public_base_url,
            prefix=cfg.s3_prefix,
        )

    raise ValueError(f"Unknown storage backend: {backend}")
