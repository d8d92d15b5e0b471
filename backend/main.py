# main.py

import logging

import uvicorn

from resumepdf.core.config import settings
from resumepdf.main import app

logger = logging.getLogger(__name__)


def run() -> None:
    logger.info("Server running on http://localhost:%d", settings.PORT)
    logger.info("HTML to PDF converter ready!")
    # uvicorn owns SIGINT/SIGTERM: it stops accepting connections, waits up to
    # SHUTDOWN_TIMEOUT seconds for in-flight requests, then runs the lifespan
    # shutdown which closes the database.
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
