"""
MongoDB client management.

The service talks to a single collection of a single database.  The
client is created once when the application starts (see the lifespan
in ``main``) and closed on shutdown; the driver pools connections
internally and the client is safe to share between concurrent
requests.
"""

import logging

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from .config import Settings

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> AsyncMongoClient:
    """Create a MongoDB client for ``settings.mongodb_url``.

    No network round trip happens here; the driver connects lazily on
    the first operation.
    """
    client = AsyncMongoClient(
        settings.mongodb_url,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
    )
    logger.info(
        "MongoDB client created for database %s", settings.mongodb_database
    )
    return client


def get_books_collection(client: AsyncMongoClient, settings: Settings) -> AsyncCollection:
    """Return the configured books collection."""
    return client[settings.mongodb_database][settings.mongodb_collection]


async def ping(collection: AsyncCollection) -> None:
    """Round trip to the server owning ``collection``.

    Raises ``pymongo.errors.PyMongoError`` if the server is unreachable.
    """
    await collection.database.command("ping")


async def close_client(client: AsyncMongoClient) -> None:
    """Close all pooled connections held by ``client``."""
    await client.close()
    logger.info("MongoDB connections closed")
