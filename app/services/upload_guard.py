# app/services/upload_guard.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable, Optional

from app.config import settings
from app.core.errors import PayloadTooLarge, UnsupportedType, ValidationError
from app.core.logging_config import logger
from app.observability.metrics import upload_counter, upload_size_hist
from app.services.storage import Storage

MIME_BY_EXTENSION = {
    "pdf": {"application/pdf"},
    "jpg": {"image/jpeg", "image/pjpeg"},
    "jpeg": {"image/jpeg", "image/pjpeg"},
    "png": {"image/png"},
}
# browsers and curl send these when they don't know better
GENERIC_MIMES = {"", "application/octet-stream", "binary/octet-stream"}


def file_extension(filename: str) -> str:
    return PurePath(filename or "").suffix.lower().lstrip(".")


@dataclass
class StoredFile:
    url: str
    filename: str
    size: int


class UploadGuard:
    """
    Gate in front of blob storage: size first, then type.
    Nothing reaches ``storage`` unless both checks pass.
    """

    def __init__(
        self,
        storage: Storage,
        max_bytes: int = settings.upload_max_bytes,
        allowed_extensions: Optional[Iterable[str]] = None,
    ):
        self.storage = storage
        self.max_bytes = max_bytes
        self.allowed_extensions = {
            e.lower().lstrip(".") for e in (allowed_extensions or settings.allowed_extensions)
        }

    def check(self, filename: str, size: int, content_type: Optional[str] = None) -> None:
        if size >= self.max_bytes:
            upload_counter.labels(result="too_large").inc()
            logger.info("upload_rejected", reason="payload_too_large", filename=filename, size=size)
            raise PayloadTooLarge(
                f"File is too large (limit {self.max_bytes // (1024 * 1024)} MB)"
            )

        ext = file_extension(filename)
        if ext not in self.allowed_extensions:
            upload_counter.labels(result="unsupported_type").inc()
            logger.info("upload_rejected", reason="unsupported_type", filename=filename, ext=ext)
            allowed = ", ".join(sorted(self.allowed_extensions))
            raise UnsupportedType(f"File type not allowed. Allowed types: {allowed}")

        ctype = (content_type or "").split(";")[0].strip().lower()
        known = MIME_BY_EXTENSION.get(ext)
        if ctype not in GENERIC_MIMES and known is not None and ctype not in known:
            upload_counter.labels(result="unsupported_type").inc()
            logger.info(
                "upload_rejected", reason="mime_mismatch", filename=filename, content_type=ctype
            )
            raise UnsupportedType(f"Content type {ctype} does not match .{ext}")

    def accept(self, filename: str, data: bytes, content_type: Optional[str] = None) -> StoredFile:
        self.check(filename, len(data), content_type)
        if not data:
            upload_counter.labels(result="empty").inc()
            raise ValidationError({"file": "File is empty"})

        try:
            stored_type = None if (content_type or "") in GENERIC_MIMES else content_type
            url = self.storage.store(data, filename, stored_type)
        except Exception:
            upload_counter.labels(result="error").inc()
            raise

        upload_counter.labels(result="stored").inc()
        upload_size_hist.observe(len(data))
        logger.info("upload_stored", filename=filename, size=len(data), url=url)
        return StoredFile(url=url, filename=filename, size=len(data))
