# app/routers/uploads.py
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile

from app.core.errors import ValidationError
from app.core.rate_limit import PUBLIC_LIMIT, limiter
from app.dependencies import get_upload_guard
from app.schemas.uploads import UploadResponse
from app.services.upload_guard import UploadGuard

router = APIRouter(prefix="/api", tags=["uploads"])

CHUNK_SIZE = 1024 * 1024


async def _read_capped(file: UploadFile, limit: int) -> bytes:
    """Read at most ``limit`` bytes; a longer stream is rejected without buffering it."""
    chunks = []
    total = 0
    while True:
        chunk = await file.read(CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total >= limit:
            return b"".join(chunks) + chunk
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/upload", response_model=UploadResponse)
@limiter.limit(PUBLIC_LIMIT)
async def upload_file(
    request: Request,
    file: Optional[UploadFile] = File(None),
    guard: UploadGuard = Depends(get_upload_guard),
) -> UploadResponse:
    """
    Multipart upload (field ``file``). Returns the public URL to put in the
    quote's ``fileUrl`` or the application's ``cvUrl``.
    """
    if file is None or not file.filename:
        raise ValidationError({"file": "No file received."})

    # cheap early exit when the client told us the size
    if file.size is not None:
        guard.check(file.filename, file.size, file.content_type)

    data = await _read_capped(file, guard.max_bytes)
    stored = guard.accept(file.filename, data, file.content_type)
    return UploadResponse(url=stored.url, filename=stored.filename)
