"""app/storage/__init__.py — public API of the storage package."""

from app.storage.directory import ensure_directory
from app.storage.naming import NameAllocator, sanitize_filename

__all__ = [
    "ensure_directory",
    "NameAllocator",
    "sanitize_filename",
]
