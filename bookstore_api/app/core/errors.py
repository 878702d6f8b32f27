"""
Application level exception handlers.

Driver failures (server unreachable, timeouts, write errors) are not
retried.  They are logged with their traceback and answered with a
generic 500 so that driver details never leak to clients.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


def setup_error_handling(app: FastAPI) -> None:
    """Register the exception handlers on ``app``."""

    @app.exception_handler(PyMongoError)
    async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
        logger.error(
            "Store operation failed for %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
