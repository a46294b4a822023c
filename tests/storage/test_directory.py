"""
tests/storage/test_directory.py

Unit tests for ensure_directory.
"""

from pathlib import Path

import pytest

from app.core.exceptions import DirectoryUncreatableError
from app.storage.directory import ensure_directory


class TestEnsureDirectory:

    def test_creates_missing_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "uploads"

        result = ensure_directory(target)

        assert target.is_dir()
        assert result == target.resolve()

    def test_is_idempotent(self, tmp_path: Path) -> None:
        target = tmp_path / "uploads"
        ensure_directory(target)
        (target / "keep.txt").write_bytes(b"x")

        ensure_directory(target)

        assert (target / "keep.txt").read_bytes() == b"x"

    def test_existing_file_raises(self, tmp_path: Path) -> None:
        """A regular file where the directory should be is a startup failure."""
        blocker = tmp_path / "uploads"
        blocker.write_bytes(b"not a dir")

        with pytest.raises(DirectoryUncreatableError):
            ensure_directory(blocker)

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        ensure_directory(str(tmp_path / "uploads"))
        assert (tmp_path / "uploads").is_dir()
