"""
app/services/listing_service.py

Lists the files in the upload directory, newest first.

The directory itself is the only record of what has been uploaded, so every
call re-reads it; nothing is cached between requests.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from app.core.config import settings
from app.core.exceptions import DirectoryUnreadableError
from app.core.logger import get_logger
from app.models.file_models import FileListingEntry

logger = get_logger(__name__)


class ListingService:
    """
    Reads name, size and modification time for each file in the upload
    directory.

    Only regular files are listed. Entries that vanish between the directory
    scan and the stat call, or that cannot be stat'ed, are skipped; only a
    failure to enumerate the directory itself fails the listing.
    """

    def __init__(self, upload_dir: str | Path | None = None) -> None:
        self._upload_dir = Path(upload_dir or settings.upload_dir).resolve()

    def list_files(self) -> List[FileListingEntry]:
        """
        Return one entry per stored file, most recently modified first.

        Ties on modification time come back in no particular order.

        Raises:
            DirectoryUnreadableError: If the directory cannot be enumerated.
        """
        entries: List[tuple[int, FileListingEntry]] = []

        try:
            with os.scandir(self._upload_dir) as it:
                for dir_entry in it:
                    try:
                        if not dir_entry.is_file(follow_symlinks=False):
                            continue
                        stat = dir_entry.stat(follow_symlinks=False)
                    except FileNotFoundError:
                        logger.debug("'%s' disappeared during listing.", dir_entry.name)
                        continue
                    except OSError as exc:
                        logger.warning("Skipping unreadable entry '%s': %s", dir_entry.name, exc)
                        continue

                    entries.append(
                        (
                            stat.st_mtime_ns,
                            FileListingEntry(
                                name=dir_entry.name,
                                size=stat.st_size,
                                uploaded_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                            ),
                        )
                    )
        except OSError as exc:
            raise DirectoryUnreadableError(
                f"Cannot read upload directory '{self._upload_dir}': {exc}"
            ) from exc

        entries.sort(key=lambda pair: pair[0], reverse=True)
        return [entry for _, entry in entries]
