#!/usr/bin/env python3
"""Start the Atrium API with Logfire tracking of startup errors."""

import sys

import logfire
import uvicorn

from atrium.config import Settings
from atrium.util.logging import setup_logging
from atrium.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire before the app factory instruments anything
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Atrium API", host=settings.host, port=settings.port
        )

        uvicorn.run(
            "atrium.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
