"""
app/storage/naming.py

Allocates collision-resistant on-disk names for uploaded files.

Allocated names have the shape ``<millis>-<random>-<original>``:

    1718000000000-482913377-report.pdf

The millisecond timestamp keeps names roughly ordered by upload time and the
random component (0..1e9) separates uploads that land in the same
millisecond. The original name is kept as a suffix for display, but only its
final path component survives, so an allocated name can never point outside
the upload directory.
"""

from __future__ import annotations

import os
import random
import re
import time
from pathlib import Path
from typing import Callable

from app.core.constants import (
    FALLBACK_FILENAME,
    MAX_ALLOCATION_ATTEMPTS,
    MAX_ORIGINAL_NAME_BYTES,
    RANDOM_SUFFIX_MAX,
)
from app.core.exceptions import NameAllocationError
from app.core.logger import get_logger

logger = get_logger(__name__)

# Browsers on Windows may send full paths with backslashes.
_SEPARATORS = re.compile(r"[\\/]")


def _truncate_utf8(text: str, limit: int) -> str:
    """Cut ``text`` to at most ``limit`` UTF-8 bytes without splitting a character."""
    return text.encode("utf-8")[:limit].decode("utf-8", errors="ignore")


def sanitize_filename(original_name: str | None) -> str:
    """
    Reduce a client-supplied filename to a safe single path segment.

    Both ``/`` and ``\\`` count as separators and everything up to the last
    one is dropped; NUL bytes are removed. Names that end up empty or equal
    to ``.`` / ``..`` are replaced with a fixed fallback. Long names are cut
    to ``MAX_ORIGINAL_NAME_BYTES`` (UTF-8) by shortening the stem; the
    extension is kept.

    >>> sanitize_filename("../../etc/passwd")
    'passwd'
    >>> sanitize_filename("C:\\\\Users\\\\me\\\\photo.jpg")
    'photo.jpg'
    """
    name = (original_name or "").replace("\x00", "")
    name = _SEPARATORS.split(name)[-1].strip()
    if name in ("", ".", ".."):
        return FALLBACK_FILENAME

    if len(name.encode("utf-8")) <= MAX_ORIGINAL_NAME_BYTES:
        return name

    stem, ext = os.path.splitext(name)
    ext_bytes = len(ext.encode("utf-8"))
    if not stem or ext_bytes >= MAX_ORIGINAL_NAME_BYTES // 2:
        return _truncate_utf8(name, MAX_ORIGINAL_NAME_BYTES)
    return _truncate_utf8(stem, MAX_ORIGINAL_NAME_BYTES - ext_bytes) + ext


class NameAllocator:
    """
    Produces ``<millis>-<random>-<name>`` filenames.

    When a ``directory`` is given, each candidate is checked against the
    directory and redrawn on collision, up to ``max_attempts`` times.
    Without a directory the allocator relies on the size of the key space
    alone.

    ``clock`` must return milliseconds since the Unix epoch; ``rng`` must
    expose ``randint``. Both exist so tests can pin the output.
    """

    def __init__(
        self,
        directory: str | Path | None = None,
        clock: Callable[[], int] | None = None,
        rng: random.Random | None = None,
        max_attempts: int = MAX_ALLOCATION_ATTEMPTS,
    ) -> None:
        self._directory = Path(directory) if directory is not None else None
        self._clock = clock or (lambda: time.time_ns() // 1_000_000)
        self._rng = rng or random.SystemRandom()
        self._max_attempts = max_attempts

    def allocate(self, original_name: str | None) -> str:
        """
        Return a fresh on-disk filename for ``original_name``.

        Raises:
            NameAllocationError: If every candidate already exists on disk.
        """
        safe_name = sanitize_filename(original_name)

        for _ in range(self._max_attempts):
            candidate = self._candidate(safe_name)
            if self._directory is None or not (self._directory / candidate).exists():
                return candidate
            logger.debug("Allocated name '%s' already taken, redrawing.", candidate)

        raise NameAllocationError(
            f"Could not allocate a free name for '{safe_name}' "
            f"after {self._max_attempts} attempt(s)."
        )

    def _candidate(self, safe_name: str) -> str:
        timestamp = self._clock()
        suffix = self._rng.randint(0, RANDOM_SUFFIX_MAX)
        return f"{timestamp}-{suffix}-{safe_name}"
