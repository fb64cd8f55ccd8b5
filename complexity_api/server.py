#!/usr/bin/env python3
"""
Server entry point for the Complexity Analyzer service.
"""
import uvicorn
from complexity_api.config import settings, logger


def main():
    """Run the server."""
    logger.info(f"Starting Complexity Analyzer on {settings.HOST}:{settings.PORT}")

    uvicorn.run(
        "complexity_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
