# =============================================================================
# app/__main__.py - Server Runner
# =============================================================================
# Runs the API with uvicorn on the configured host and port.
#
# Usage:
#   python -m app
# =============================================================================

import uvicorn

from app.config import get_settings


def main() -> None:
    """Serve app.main:app until interrupted."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
