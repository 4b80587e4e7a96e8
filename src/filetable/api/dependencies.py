from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from filetable.core.ports.file_source import FileSource


async def get_file_source(request: Request) -> AsyncIterator[FileSource]:
    """Yield the ``FileSource`` created by the application lifespan."""
    yield request.app.state.file_source
