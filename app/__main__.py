"""
app/__main__.py

Runs the server with uvicorn:

    python -m app

Host, port and upload directory come from Settings (HOST, PORT, UPLOAD_DIR).
"""

from pathlib import Path

import uvicorn

from app.core.config import settings
from app.core.logger import get_logger
from app.core.network import get_local_ip_address

logger = get_logger(__name__)


def _log_banner() -> None:
    """Log where the server can be reached and where uploads land."""
    local_ip = get_local_ip_address()
    logger.info("%s started", settings.app_name)
    logger.info("  Local:   http://localhost:%d", settings.port)
    logger.info("  Network: http://%s:%d", local_ip, settings.port)
    logger.info("  Upload folder: %s", Path(settings.upload_dir).resolve())


def main() -> None:
    _log_banner()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
