"""
tests/core/test_config.py

Unit tests for Settings defaults and environment overrides.
"""

import pytest

from app.core.config import Settings
from app.core.constants import DEFAULT_MAX_FILE_SIZE


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("MAX_FILE_SIZE", "UPLOAD_DIR", "PORT", "HOST"):
        monkeypatch.delenv(var, raising=False)


class TestSettings:

    def test_default_max_file_size_is_100_mib(self, clean_env) -> None:
        """The per-file limit defaults to 100 MiB (104 857 600 bytes)."""
        assert Settings(_env_file=None).max_file_size == 100 * 1024 * 1024
        assert DEFAULT_MAX_FILE_SIZE == 104_857_600

    def test_default_server_binding(self, clean_env) -> None:
        settings = Settings(_env_file=None)
        assert settings.host == "0.0.0.0"
        assert settings.port == 3000
        assert settings.upload_dir == "./uploads"

    def test_max_file_size_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE", "2048")
        assert Settings(_env_file=None).max_file_size == 2048
