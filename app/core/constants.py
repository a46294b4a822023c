"""
app/core/constants.py

Application-wide fixed constants.

These are business rules that are part of the system's contract and are
NOT configurable via environment variables.
"""

# ── Upload form ────────────────────────────────────────────────────────────────

#: Multipart field that carries the uploaded file parts.
UPLOAD_FIELD_NAME: str = "files"

#: Default per-file size limit (100 MiB). Overridable via MAX_FILE_SIZE.
DEFAULT_MAX_FILE_SIZE: int = 100 * 1024 * 1024

# ── Name allocation ────────────────────────────────────────────────────────────

#: Upper bound (inclusive) of the random component of an allocated name.
RANDOM_SUFFIX_MAX: int = 1_000_000_000

#: Used when a client filename sanitises down to nothing.
FALLBACK_FILENAME: str = "file"

#: Redraws attempted when an allocated name already exists on disk.
MAX_ALLOCATION_ATTEMPTS: int = 5

# ── Response messages ──────────────────────────────────────────────────────────

UPLOAD_SUCCESS_MESSAGE: str = "Files uploaded successfully"

#: Byte budget (UTF-8) for the original-name part of an allocated name. The
#: "<millis>-<random>-" prefix takes at most 26 bytes and NAME_MAX is 255.
MAX_ORIGINAL_NAME_BYTES: int = 200
