"""
app/api/upload_controller.py

Handles incoming requests to POST /upload.

This layer is responsible only for HTTP concerns:
  - Parsing the multipart form and collecting every file part sent in
    the 'files' field.
  - Delegating storage to UploadService.
  - Translating service-level errors into appropriate HTTP responses.

Responses:
  200  Every part was stored.  Body contains a message and the manifest of
       stored files (original name, allocated name, size, path).
  400  The request carried no file parts, or the form could not be parsed.
  413  A file exceeded the per-file size limit.  Nothing was stored.
  500  A file could not be written.  Nothing was stored.
"""

from typing import List

from fastapi import APIRouter, Request, UploadFile
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.core.constants import UPLOAD_FIELD_NAME
from app.core.exceptions import (
    AppBaseException,
    FileTooLargeError,
    NoFilesProvidedError,
)
from app.core.logger import get_logger
from app.models.upload_models import UploadResponse
from app.services.upload_service import UploadService

logger = get_logger(__name__)

router = APIRouter(tags=["Upload"])


# ── Helpers ────────────────────────────────────────────────────────────────────

def _err(message: str, status: int = 400) -> JSONResponse:
    """Return a JSON error response with the standard error shape."""
    return JSONResponse(status_code=status, content={"error": message})


# ── Endpoint ───────────────────────────────────────────────────────────────────

@router.post("/upload", response_model=UploadResponse, summary="Upload one or more files")
async def upload(request: Request) -> JSONResponse:
    """
    Accepts one or more files in the 'files' field:

      curl -F "files=@a.jpg" -F "files=@b.mov" http://host:3000/upload

    Each file is stored under a unique name in the upload directory.
    """
    # ── 1. Parse multipart form ────────────────────────────────────────────────
    try:
        form = await request.form()
    except Exception:
        return _err("Invalid multipart/form-data payload.")

    # ── 2. Collect file parts ──────────────────────────────────────────────────
    # Text values sent under the same field name are ignored.
    uploaded_files: List[UploadFile] = [
        value
        for value in form.getlist(UPLOAD_FIELD_NAME)
        if isinstance(value, StarletteUploadFile)
    ]

    service: UploadService = request.app.state.upload_service

    # ── 3. Delegate to service ─────────────────────────────────────────────────
    try:
        result = await service.intake(uploaded_files)

    except NoFilesProvidedError:
        logger.warning("Upload request rejected — no files.")
        return _err("No files uploaded")

    except FileTooLargeError as exc:
        logger.warning("Upload request rejected — %s", exc)
        return _err("File too large", status=413)

    except AppBaseException as exc:
        logger.exception("Upload failed: %s", exc)
        return _err("Upload failed", status=500)

    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error during upload: %s", exc)
        return _err("Upload failed", status=500)

    finally:
        await form.close()

    return JSONResponse(status_code=200, content=result.model_dump(by_alias=True))
