"""File source backed by the remote file-listing API."""

from __future__ import annotations

import logging

import httpx

from filetable.client.errors import FetchError
from filetable.config import FileSourceSettings

logger = logging.getLogger(__name__)


class HttpFileSource:
    """Implements the ``FileSource`` protocol over ``httpx.AsyncClient``.

    The client configuration is fixed at construction time and shared
    read-only by all concurrent requests.
    """

    def __init__(self, settings: FileSourceSettings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.base_url,
            headers={"Authorization": settings.auth_header},
            timeout=settings.timeout_seconds,
            transport=transport,
        )

    async def list_files(self) -> list[str]:
        try:
            response = await self._client.get("/secret/files")
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error fetching file list: %s", exc)
            raise FetchError(f"Failed to fetch file list: {exc}") from exc

        if not isinstance(body, dict):
            return []
        files = body.get("files") or []
        if not isinstance(files, list) or not all(isinstance(name, str) for name in files):
            logger.error("Unexpected file list format: %r", files)
            raise FetchError(f"Failed to fetch file list: unexpected format {type(files).__name__}")
        return files

    async def download_file_content(self, file_name: str) -> str | None:
        if not isinstance(file_name, str) or not file_name.strip():
            logger.error("Invalid file name provided for download: %r", file_name)
            return None
        try:
            response = await self._client.get(f"/secret/file/{file_name}")
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Error downloading file %s: %s (status %d: %s)",
                file_name,
                exc,
                exc.response.status_code,
                exc.response.text,
            )
            return None
        except httpx.HTTPError as exc:
            logger.error("Error downloading file %s: %s", file_name, exc)
            return None

        content_type = response.headers.get("content-type", "")
        if "json" in content_type:
            logger.warning("Unexpected data format for file %s: expected text, got %s", file_name, content_type)
            return None
        return response.text

    async def ping(self) -> bool:
        try:
            await self.list_files()
        except FetchError:
            return False
        return True

    async def aclose(self) -> None:
        await self._client.aclose()
