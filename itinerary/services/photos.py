from __future__ import annotations

import asyncio
import base64
import logging
import uuid
from typing import Iterable

import httpx
from storage3.utils import StorageException
from supabase import AsyncClient

from itinerary.models.photo import PhotoUpload
from itinerary.services.errors import PersistenceFailure, StorageNotConfigured

logger = logging.getLogger(__name__)

# Errores del bucket que se reportan como fallo de almacenamiento
STORAGE_ERRORS = (StorageException, httpx.HTTPError)


def local_preview(photo: PhotoUpload) -> str:
    """Vista previa solo de sesión: data URL con el contenido del archivo."""
    encoded = base64.b64encode(photo.content).decode("ascii")
    return f"data:{photo.content_type};base64,{encoded}"


class PhotoStorage:
    def __init__(self, client: AsyncClient | None, bucket: str = "trip-photos", list_limit: int = 100):
        self.client = client
        self.bucket = bucket
        self.list_limit = list_limit

    @property
    def configured(self) -> bool:
        return self.client is not None

    def _bucket(self):
        if self.client is None:
            raise StorageNotConfigured("Service role key not configured")
        return self.client.storage.from_(self.bucket)

    async def upload(self, photo: PhotoUpload) -> str:
        """Sube un archivo como '<uuid>-<nombre>' y devuelve su URL pública."""
        bucket = self._bucket()
        file_path = f"{uuid.uuid4()}-{photo.filename}"

        try:
            result = await bucket.upload(file_path, photo.content, {"content-type": photo.content_type})
            stored_path = getattr(result, "path", None) or file_path
            return await bucket.get_public_url(stored_path)
        except STORAGE_ERRORS as exc:
            raise PersistenceFailure("upload", self.bucket, str(exc)) from exc

    async def list_urls(self) -> list[str]:
        bucket = self._bucket()
        try:
            files = await bucket.list("", {"limit": self.list_limit})
            return [await bucket.get_public_url(f["name"]) for f in files or []]
        except STORAGE_ERRORS as exc:
            raise PersistenceFailure("list", self.bucket, str(exc)) from exc

    async def _upload_or_preview(self, photo: PhotoUpload) -> str:
        try:
            return await self.upload(photo)
        except (PersistenceFailure, StorageNotConfigured) as exc:
            logger.warning("Upload of %s failed, using local preview: %s", photo.filename, exc)
            return local_preview(photo)

    async def upload_many(self, photos: Iterable[PhotoUpload]) -> list[str]:
        """
        Sube todas las fotos a la vez sobre el event loop. Si una falla se usa
        su vista previa local, sin abortar las demás. Conserva el orden de entrada.
        """
        return list(await asyncio.gather(*(self._upload_or_preview(p) for p in photos)))
