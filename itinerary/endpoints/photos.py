from fastapi import APIRouter, File, UploadFile, status
from fastapi.responses import JSONResponse
from itinerary.core.store_session import StoreDep
from itinerary.models.photo import PhotoList, PhotoUpload, PhotoUrl
from itinerary.services.errors import PersistenceFailure, StorageNotConfigured
from typing import Optional
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Photos"])


async def _to_upload(file: UploadFile) -> PhotoUpload:
    return PhotoUpload(
        filename=file.filename or "photo",
        content=await file.read(),
        content_type=file.content_type or "application/octet-stream",
    )


@router.post("/api/upload", response_model=PhotoUrl)
async def upload_photo(store: StoreDep, file: Optional[UploadFile] = File(None)):
    """Sube una foto al bucket y devuelve su URL pública."""
    if file is None:
        return JSONResponse({"error": "No file provided"}, status_code=status.HTTP_400_BAD_REQUEST)

    try:
        url = await store.photos.upload(await _to_upload(file))
    except StorageNotConfigured as e:
        return JSONResponse({"error": str(e)}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except PersistenceFailure as e:
        logger.error(f"Upload failed: {e}")
        return JSONResponse({"error": e.message or "Upload failed"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return PhotoUrl(url=url)


@router.get("/api/photos", response_model=PhotoList)
async def list_photos(store: StoreDep):
    try:
        photos = await store.photos.list_urls()
    except StorageNotConfigured as e:
        return JSONResponse({"error": str(e)}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except PersistenceFailure as e:
        return JSONResponse({"error": e.message}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return PhotoList(photos=photos)


@router.post("/v1/photos", response_model=PhotoList)
async def add_photos(store: StoreDep, files: list[UploadFile] = File(...)):
    """
    Sube varias fotos en paralelo. Las que fallan quedan como vista previa
    local (data URL) y no se guardan en el bucket.
    """
    uploads = [await _to_upload(f) for f in files]
    urls = await store.add_photos(uploads)
    return PhotoList(photos=urls)


@router.get("/v1/photos", response_model=PhotoList)
async def get_photos(store: StoreDep):
    return PhotoList(photos=list(store.state.photos))
