# app/routers/files.py
from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from app.core.errors import NotFound
from app.dependencies import get_storage_service
from app.services.storage import LocalStorage, Storage, guess_content_type

router = APIRouter(prefix="/files", tags=["files"])


@router.get("/{key:path}")
def serve_local_file(key: str, storage: Storage = Depends(get_storage_service)):
    """Serves uploads for the local backend; S3 URLs point at the bucket directly."""
    if not isinstance(storage, LocalStorage) or not storage.exists(key):
        raise NotFound("File", key)
    return FileResponse(storage.path_for(key), media_type=guess_content_type(key))
