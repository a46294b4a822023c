"""
app/storage/directory.py

Creates the single flat upload directory before the server accepts requests.
"""

from __future__ import annotations

from pathlib import Path

from app.core.exceptions import DirectoryUncreatableError
from app.core.logger import get_logger

logger = get_logger(__name__)


def ensure_directory(path: str | Path) -> Path:
    """
    Create ``path`` (and any missing parents) if it does not exist yet.

    Calling this on an existing directory is a no-op, so it is safe to call
    on every startup.

    Args:
        path: Directory to create.

    Returns:
        The directory as an absolute Path.

    Raises:
        DirectoryUncreatableError: If the directory cannot be created, or the
                                   path exists but is not a directory.
    """
    directory = Path(path).resolve()

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryUncreatableError(
            f"Cannot create upload directory '{directory}': {exc}"
        ) from exc

    logger.debug("Upload directory ready: %s", directory)
    return directory
