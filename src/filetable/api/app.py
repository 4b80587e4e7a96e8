from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from filetable.api.lifespan import lifespan
from filetable.api.routes.files import router as files_router
from filetable.api.routes.health import router as health_router
from filetable.api.routes.root import router as root_router
from filetable.config import FileSourceSettings, get_settings


def create_app(settings: FileSourceSettings | None = None) -> FastAPI:
    app = FastAPI(
        title="Filetable API",
        description="Fetch, validate, and serve CSV records from the upstream file API.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings or get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(app.state.settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(files_router)

    return app
