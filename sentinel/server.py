"""CLI entrypoint for running the FastAPI app with Uvicorn."""

import argparse
import logging
import os

import uvicorn

from sentinel.core.config import settings
from sentinel.core.logging_config import configure_logging

logger = logging.getLogger("sentinel")


def main() -> None:
    parser = argparse.ArgumentParser(description="Sentinel API server")
    parser.add_argument("--host", default=settings.HOST, help=f"Host to bind (default: {settings.HOST})")
    parser.add_argument("--port", type=int, default=settings.PORT, help=f"Port to bind (default: {settings.PORT})")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    # The console "status" command reports this port; reload workers re-read it from env
    settings.PORT = args.port
    os.environ["PORT"] = str(args.port)

    configure_logging()
    logger.info(f"Sentinel API running on port {args.port}")

    # Reload needs an import string instead of the app object
    uvicorn.run(
        "sentinel.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":  # pragma: no cover - CLI invocation guard
    main()
