from __future__ import annotations

from pydantic import BaseModel


class FileListResponse(BaseModel):
    files: list[str]


class ErrorResponse(BaseModel):
    message: str
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    upstream: str = "up"
