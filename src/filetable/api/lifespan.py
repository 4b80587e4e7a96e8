from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from filetable.client.http import HttpFileSource


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    source = HttpFileSource(app.state.settings)
    app.state.file_source = source
    try:
        yield
    finally:
        await source.aclose()
