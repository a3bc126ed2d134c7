#!/usr/bin/env python3
"""Start the Discuss API, reporting startup errors to Logfire."""

import sys
import logfire
import uvicorn

from discuss.config import Settings
from discuss.util.error import check_deployable
from discuss.util.logging import setup_logging
from discuss.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Startup errors must be captured, so configure before importing the app
    setup_logging(settings)
    configure_logfire(settings)

    try:
        check_deployable(settings)

        logfire.info(
            "Starting Discuss API",
            port=settings.port,
            cache_backend=settings.cache.backend,
            summarizer_configured=settings.summary.api_key is not None,
        )

        uvicorn.run(
            "discuss.interface.api.app:app",
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
