"""Cloud Storage uploads for user documents, images and presentations."""

import asyncio
import logging
import time
from typing import Any
from urllib.parse import quote, unquote, urlparse

from google.api_core import exceptions as google_exceptions

from services.errors import InputValidationError, UpstreamError

logger = logging.getLogger(__name__)

PUBLIC_HOST = "storage.googleapis.com"


def public_url(bucket: str, object_name: str) -> str:
    return f"https://{PUBLIC_HOST}/{bucket}/{quote(object_name)}"


def parse_public_url(url: str) -> tuple[str, str]:
    """Split a public object URL into (bucket, object name)."""
    parsed = urlparse(url)
    parts = parsed.path.lstrip("/").split("/", 1)
    if parsed.netloc != PUBLIC_HOST or len(parts) != 2 or not all(parts):
        raise InputValidationError(f"Not a Cloud Storage object URL: {url}")
    return parts[0], unquote(parts[1])


class FileStorage:
    def __init__(self, client: Any) -> None:
        self._client = client

    async def upload(
        self,
        bucket: str,
        folder: str,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> str:
        object_name = f"{folder}/{int(time.time() * 1000)}-{filename}"
        blob = self._client.bucket(bucket).blob(object_name)
        try:
            await asyncio.to_thread(blob.upload_from_string, content, content_type=content_type)
        except google_exceptions.GoogleAPIError as e:
            logger.error("Upload to gs://%s/%s failed: %s", bucket, object_name, e)
            raise UpstreamError("File storage unavailable") from e
        return public_url(bucket, object_name)

    async def delete(self, url: str) -> None:
        bucket, object_name = parse_public_url(url)
        blob = self._client.bucket(bucket).blob(object_name)
        try:
            await asyncio.to_thread(blob.delete)
        except google_exceptions.NotFound:
            logger.warning("gs://%s/%s already gone", bucket, object_name)
        except google_exceptions.GoogleAPIError as e:
            logger.error("Delete of gs://%s/%s failed: %s", bucket, object_name, e)
            raise UpstreamError("File storage unavailable") from e
