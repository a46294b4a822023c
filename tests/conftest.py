"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.
"""

import io
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


# ── Settings & storage fixtures ────────────────────────────────────────────────

@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Upload directory for one test. Not created up front — startup does that."""
    return tmp_path / "uploads"


@pytest.fixture
def test_settings(upload_dir: Path) -> Settings:
    """Settings pointing at the per-test upload directory with a 1 KiB limit."""
    return Settings(upload_dir=str(upload_dir), max_file_size=1024, upload_chunk_size=64)


# ── Core client fixture ────────────────────────────────────────────────────────

@pytest.fixture
def client(test_settings: Settings) -> TestClient:
    """
    A synchronous TestClient wrapping a freshly built app.

    Function-scoped so every test gets its own empty upload directory.
    The lifespan context (which creates the directory) is entered automatically.
    """
    with TestClient(create_app(test_settings), raise_server_exceptions=False) as c:
        yield c


# ── Sample file fixtures ───────────────────────────────────────────────────────

@pytest.fixture
def sample_file() -> tuple:
    """
    A (field_name, (filename, file_obj, content_type)) tuple ready for
    use with TestClient's `files=` parameter.

    Usage:
        response = client.post("/upload", files=[sample_file])
    """
    return ("files", ("report.pdf", io.BytesIO(b"%PDF-1.4\n%%EOF"), "application/pdf"))


@pytest.fixture
def oversized_file(test_settings: Settings) -> tuple:
    """A part one byte over the configured per-file limit."""
    payload = b"x" * (test_settings.max_file_size + 1)
    return ("files", ("huge.bin", io.BytesIO(payload), "application/octet-stream"))
