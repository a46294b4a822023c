"""
tests/services/test_listing_service.py

Unit tests for ListingService against a real temporary directory.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from app.core.exceptions import DirectoryUnreadableError
from app.models.file_models import FileListingEntry
from app.services.listing_service import ListingService


def _write(directory: Path, name: str, content: bytes, mtime: int) -> Path:
    path = directory / name
    path.write_bytes(content)
    os.utime(path, (mtime, mtime))
    return path


class TestListFiles:

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert ListingService(tmp_path).list_files() == []

    def test_sorted_newest_first(self, tmp_path: Path) -> None:
        _write(tmp_path, "old.txt", b"1", mtime=1_000_000)
        _write(tmp_path, "new.txt", b"2", mtime=3_000_000)
        _write(tmp_path, "mid.txt", b"3", mtime=2_000_000)

        names = [e.name for e in ListingService(tmp_path).list_files()]

        assert names == ["new.txt", "mid.txt", "old.txt"]

    def test_entry_fields(self, tmp_path: Path) -> None:
        _write(tmp_path, "a.bin", b"12345", mtime=1_700_000_000)

        (entry,) = ListingService(tmp_path).list_files()

        assert isinstance(entry, FileListingEntry)
        assert entry.name == "a.bin"
        assert entry.size == 5
        assert entry.uploaded_at == datetime.fromtimestamp(1_700_000_000, tz=timezone.utc)

    def test_serialises_with_camel_case_keys(self, tmp_path: Path) -> None:
        _write(tmp_path, "a.bin", b"1", mtime=1_700_000_000)

        (entry,) = ListingService(tmp_path).list_files()

        assert set(entry.model_dump(by_alias=True, mode="json")) == {"name", "size", "uploadedAt"}

    def test_subdirectories_are_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "nested").mkdir()
        _write(tmp_path, "file.txt", b"x", mtime=1_000_000)

        names = [e.name for e in ListingService(tmp_path).list_files()]

        assert names == ["file.txt"]

    def test_listing_is_not_recursive(self, tmp_path: Path) -> None:
        (tmp_path / "nested").mkdir()
        _write(tmp_path / "nested", "inner.txt", b"x", mtime=1_000_000)

        assert ListingService(tmp_path).list_files() == []

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DirectoryUnreadableError):
            ListingService(tmp_path / "missing").list_files()

    def test_unstattable_entry_is_skipped(self, tmp_path: Path) -> None:
        """One entry failing stat with PermissionError does not fail the listing."""
        good = MagicMock()
        good.name = "good.txt"
        good.is_file.return_value = True
        good.stat.return_value = MagicMock(st_size=3, st_mtime=1_000_000, st_mtime_ns=1_000_000 * 10**9)

        locked = MagicMock()
        locked.name = "locked.txt"
        locked.is_file.return_value = True
        locked.stat.side_effect = PermissionError("denied")

        scan = MagicMock()
        scan.__enter__.return_value = iter([locked, good])

        with patch("app.services.listing_service.os.scandir", return_value=scan):
            names = [e.name for e in ListingService(tmp_path).list_files()]

        assert names == ["good.txt"]
