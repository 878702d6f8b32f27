"""
Main entrypoint for the Bookstore API.

This module assembles the FastAPI application, sets up logging and
includes the API routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn bookstore_api.app.main:app --reload

The MongoDB client is opened when the application starts and closed
when it stops.  The ``BookService`` wrapping the books collection is
kept on ``app.state`` and handed to the routes as a dependency.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.endpoints import health
from .api.router import router as api_router
from .core.config import settings
from .core.db import close_client, create_client, get_books_collection
from .core.errors import setup_error_handling
from .core.logging_config import setup_logging
from .services.book_service import BookService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the MongoDB client for the lifetime of the application.

    If a service was injected through ``create_app`` it is used as is
    and no connection is made.
    """
    if app.state.book_service is not None:
        yield
        return

    client = create_client(settings)
    app.state.book_service = BookService(get_books_collection(client, settings))
    logger.info(
        "Serving collection %s.%s", settings.mongodb_database, settings.mongodb_collection
    )
    try:
        yield
    finally:
        app.state.book_service = None
        await close_client(client)


def create_app(book_service: Optional[BookService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    book_service : Optional[BookService]
        Service to use instead of one backed by the configured MongoDB
        collection.  Mainly useful in tests.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log messages.
    setup_logging(
        settings.log_level,
        settings.log_file or None,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.book_service = book_service

    setup_error_handling(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(health.router, tags=["health"])

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
