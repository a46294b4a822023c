"""
app/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; the process environment overrides it.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import DEFAULT_MAX_FILE_SIZE


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "Media Upload Server"
    app_version: str = "1.0.0"
    debug: bool = False

    # ── Server ─────────────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 3000

    # ── Storage ────────────────────────────────────────────────────────────────
    upload_dir: str = "./uploads"
    max_file_size: int = DEFAULT_MAX_FILE_SIZE   # bytes, per uploaded file
    upload_chunk_size: int = 1024 * 1024         # bytes copied per read

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Single shared instance — import this everywhere.
settings = Settings()
