"""
app/models/file_models.py

Pydantic DTO for GET /files entries.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FileListingEntry(BaseModel):
    """
    A stored file as seen at listing time.

        { "name": "1718000000000-482913377-report.pdf", "size": 52311,
          "uploadedAt": "2024-06-10T06:13:20.512000Z" }
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    size: int
    uploaded_at: datetime = Field(alias="uploadedAt")
