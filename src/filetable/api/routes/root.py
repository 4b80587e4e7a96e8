from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint."""
    return {
        "meta": {
            "title": "Filetable API",
            "description": "Fetch, validate, and serve CSV records from the upstream file API.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "data": "/files/data",
            "list": "/files/list",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
