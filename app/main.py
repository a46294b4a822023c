"""
app/main.py

FastAPI application entry point.

Responsibilities:
  - Create the upload directory before the first request is served
  - Wire UploadService and ListingService onto app.state
  - Register all API routers and the /uploads static mount
  - Add a global exception handler for uncaught AppBaseException
  - Expose a /health endpoint for liveness probes
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.files_controller import router as files_router
from app.api.page_controller import router as page_router
from app.api.upload_controller import router as upload_router
from app.core.config import Settings, settings as default_settings
from app.core.exceptions import AppBaseException
from app.core.logger import get_logger
from app.services.listing_service import ListingService
from app.services.upload_service import UploadService
from app.storage.directory import ensure_directory
from app.storage.naming import NameAllocator

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build a FastAPI app bound to one upload directory.

    Tests pass their own Settings (pointing at a temporary directory);
    production uses the module-level ``app`` built from the environment.
    """
    settings = settings or default_settings
    upload_dir = Path(settings.upload_dir).resolve()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # DirectoryUncreatableError propagates and aborts startup.
        ensure_directory(upload_dir)
        logger.info("Serving uploads from %s", upload_dir)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=(
            "Accepts file uploads over the local network, stores them on disk "
            "under collision-resistant names, and lists them newest first."
        ),
        lifespan=lifespan,
    )

    # ── Services ───────────────────────────────────────────────────────────────

    app.state.settings = settings
    app.state.upload_service = UploadService(
        upload_dir=upload_dir,
        max_file_size=settings.max_file_size,
        chunk_size=settings.upload_chunk_size,
        allocator=NameAllocator(upload_dir),
    )
    app.state.listing_service = ListingService(upload_dir=upload_dir)

    # ── Routers ────────────────────────────────────────────────────────────────

    app.include_router(page_router)
    app.include_router(upload_router)
    app.include_router(files_router)

    # The directory is created by the lifespan hook, not at import time.
    app.mount("/uploads", StaticFiles(directory=upload_dir, check_dir=False), name="uploads")

    # ── Global exception handler ───────────────────────────────────────────────

    @app.exception_handler(AppBaseException)
    async def app_exception_handler(request: Request, exc: AppBaseException) -> JSONResponse:
        """
        Safety-net for any AppBaseException that escapes controller-level handling.
        Returns the standard error shape: { "error": "..." }
        """
        logger.exception("Unhandled application error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    # ── Health endpoint ────────────────────────────────────────────────────────

    @app.get("/health", tags=["Health"], summary="Liveness probe")
    async def health() -> dict:
        """Returns 200 OK when the service is running."""
        return {"status": "ok", "version": settings.app_version}

    return app


# ── App instance ───────────────────────────────────────────────────────────────

app = create_app()
