"""
app/models/upload_models.py

Pydantic DTOs for the upload flow.
The request has no DTO — the controller reads the multipart form directly;
only the manifest and response shapes are defined here.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class ManifestEntry(BaseModel):
    """
    One stored part of an upload request.

        {
            "originalName": "report.pdf",
            "filename": "1718000000000-482913377-report.pdf",
            "size": 52311,
            "path": "/srv/uploads/1718000000000-482913377-report.pdf"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    original_name: str = Field(alias="originalName")
    filename: str
    size: int
    path: str


class UploadResponse(BaseModel):
    """
    Successful response for POST /upload.

        { "message": "Files uploaded successfully", "files": [ <ManifestEntry>, ... ] }
    """

    message: str
    files: List[ManifestEntry]
