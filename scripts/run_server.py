#!/usr/bin/env python
"""Start the image analysis API with uvicorn."""
from __future__ import annotations

import argparse
import logging

import uvicorn

from app.config import get_settings
from app.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run the Azure AI Image Analysis API")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes (development only)")
    args = parser.parse_args()

    setup_logging(settings.log_level)
    logger.info("Server running on http://%s:%s", args.host, args.port)
    logger.info("API documentation available at %s", settings.docs_url)

    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
