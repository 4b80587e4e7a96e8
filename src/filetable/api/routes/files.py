from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from filetable.api.dependencies import get_file_source
from filetable.api.schemas import ErrorResponse, FileListResponse
from filetable.client.errors import FetchError
from filetable.core.aggregate import collect_files_data
from filetable.core.ports.file_source import FileSource
from filetable.models import FileResult

router = APIRouter(prefix="/files", tags=["files"])
logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}


def _error(message: str, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse(message=message, error=str(exc)).model_dump())


@router.get("/data", response_model=list[FileResult], responses=_ERROR_RESPONSES)
async def files_data(
    source: FileSource = Depends(get_file_source),
    file_name: Annotated[str | None, Query(alias="fileName")] = None,
) -> list[FileResult] | JSONResponse:
    """Validated lines of every file, or of ``fileName`` only."""
    try:
        return await collect_files_data(source, file_name)
    except FetchError as exc:
        logger.error("Error in files data endpoint: %s", exc)
        return _error("Error processing files data", exc)


@router.get("/list", response_model=FileListResponse, responses=_ERROR_RESPONSES)
async def files_list(source: FileSource = Depends(get_file_source)) -> FileListResponse | JSONResponse:
    try:
        return FileListResponse(files=await source.list_files())
    except FetchError as exc:
        return _error("Error fetching file list", exc)
