#!/usr/bin/env python3
"""Serve the blogger API under uvicorn.

Logfire is configured before the app module is imported so that
failures while building the app are reported too.
"""

import sys

import logfire
import uvicorn

from blogger.config import Settings
from blogger.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    with logfire.span(
        "start_app", host=settings.host, port=settings.port, git_sha=settings.git_sha
    ):
        try:
            uvicorn.run(
                "blogger.interface.api.app:app",
                host=settings.host,
                port=settings.port,
                log_level="debug" if settings.debug else "info",
            )
        except Exception as e:
            logfire.error(
                "Blogger API failed to start",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
