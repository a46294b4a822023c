"""
app/services/upload_service.py

Stores the file parts of one upload request on disk:

    [UploadFile]
      └─ NameAllocator.allocate()    original name → <millis>-<random>-<name>
           └─ stream chunks          → upload_dir/<allocated name>
                └─ UploadResponse    manifest of stored files

The allocator is constructor-injected so tests can pin the generated names;
the app factory wires one instance per application.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from fastapi import UploadFile

from app.core.config import settings
from app.core.constants import UPLOAD_SUCCESS_MESSAGE
from app.core.exceptions import (
    FileTooLargeError,
    FileWriteError,
    NameAllocationError,
    NoFilesProvidedError,
)
from app.core.logger import get_logger
from app.models.upload_models import ManifestEntry, UploadResponse
from app.storage.naming import NameAllocator

logger = get_logger(__name__)


class UploadService:
    """
    Writes uploaded parts into the upload directory.

    Design choices:
    - **All-or-nothing**: if any part is too large or cannot be written,
      every file already written for the request is removed and the error
      propagates. A request never leaves a partial file behind.
    - **Streaming copy**: parts are copied in ``chunk_size`` pieces and the
      size limit is checked as bytes arrive, not after the fact.
    """

    def __init__(
        self,
        upload_dir: str | Path | None = None,
        max_file_size: int | None = None,
        chunk_size: int | None = None,
        allocator: NameAllocator | None = None,
    ) -> None:
        self._upload_dir = Path(upload_dir or settings.upload_dir).resolve()
        self._max_file_size = max_file_size if max_file_size is not None else settings.max_file_size
        self._chunk_size = chunk_size or settings.upload_chunk_size
        self._allocator = allocator or NameAllocator(self._upload_dir)

    # ── Public API ─────────────────────────────────────────────────────────────

    async def intake(self, files: List[UploadFile]) -> UploadResponse:
        """
        Store every uploaded part and return the manifest.

        Args:
            files: UploadFile objects from the multipart form, in the order
                   they were received.

        Returns:
            UploadResponse whose ``files`` has one entry per part, in order.

        Raises:
            NoFilesProvidedError: ``files`` is empty. Nothing is written.
            FileTooLargeError:    A part exceeds the per-file limit.
            FileWriteError:       A part could not be written to disk.
        """
        if not files:
            raise NoFilesProvidedError("No files uploaded")

        manifest: List[ManifestEntry] = []
        written: List[Path] = []

        try:
            for upload in files:
                original_name = upload.filename or ""
                try:
                    allocated = self._allocator.allocate(original_name)
                except NameAllocationError as exc:
                    raise FileWriteError(str(exc)) from exc

                target = self._upload_dir / allocated
                size = await self._store(upload, target, original_name)
                written.append(target)

                manifest.append(
                    ManifestEntry(
                        original_name=original_name,
                        filename=allocated,
                        size=size,
                        path=str(target),
                    )
                )
                logger.debug("'%s' stored as '%s' (%d bytes).", original_name, allocated, size)
        except BaseException:
            self._discard(written)
            raise

        logger.info("Uploaded %d file(s)", len(manifest))
        return UploadResponse(message=UPLOAD_SUCCESS_MESSAGE, files=manifest)

    # ── Internals ──────────────────────────────────────────────────────────────

    async def _store(self, upload: UploadFile, target: Path, original_name: str) -> int:
        """
        Copy one part to ``target`` chunk by chunk.

        The target is opened in exclusive mode, so an existing file is never
        overwritten. A target created here is removed again if the copy fails
        or the request is cancelled.

        Returns:
            Number of bytes written.

        Raises:
            FileTooLargeError: As soon as the running total passes the limit.
            FileWriteError:    On any filesystem error.
        """
        # Starlette records the spooled size; reject early when it is known.
        declared = getattr(upload, "size", None)
        if isinstance(declared, int) and declared > self._max_file_size:
            raise FileTooLargeError(original_name, self._max_file_size)

        try:
            out = target.open("xb")
        except OSError as exc:
            raise FileWriteError(f"Could not create '{target.name}': {exc}") from exc

        written = 0
        try:
            with out:
                while True:
                    chunk = await upload.read(self._chunk_size)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self._max_file_size:
                        raise FileTooLargeError(original_name, self._max_file_size)
                    out.write(chunk)
        except OSError as exc:
            self._discard([target])
            raise FileWriteError(f"Could not write '{target.name}': {exc}") from exc
        except BaseException:
            self._discard([target])
            raise

        return written

    @staticmethod
    def _discard(paths: List[Path]) -> None:
        """Remove files written by a request that is being rejected."""
        for path in paths:
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                logger.error("Could not remove rejected upload '%s': %s", path, exc)
