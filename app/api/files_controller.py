"""
app/api/files_controller.py

Handles incoming requests to GET /files.

Responses:
  200  A JSON array of { name, size, uploadedAt }, newest upload first.
       An empty array means nothing has been uploaded yet.
  500  The upload directory could not be read.
"""

from typing import List

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.exceptions import DirectoryUnreadableError
from app.core.logger import get_logger
from app.models.file_models import FileListingEntry
from app.services.listing_service import ListingService

logger = get_logger(__name__)

router = APIRouter(tags=["Files"])


@router.get("/files", response_model=List[FileListingEntry], summary="List uploaded files")
async def list_files(request: Request) -> JSONResponse:
    """Return every stored file, most recently uploaded first."""
    service: ListingService = request.app.state.listing_service

    try:
        entries = service.list_files()
    except DirectoryUnreadableError as exc:
        logger.error("Listing failed: %s", exc)
        return JSONResponse(status_code=500, content={"error": "Unable to read files"})

    logger.debug("Listing returned %d file(s).", len(entries))
    return JSONResponse(
        status_code=200,
        content=[entry.model_dump(by_alias=True, mode="json") for entry in entries],
    )
