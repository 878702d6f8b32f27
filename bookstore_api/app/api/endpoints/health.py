"""
Health check endpoint.

Reports whether the MongoDB server backing the books collection
answers a ``ping``.
"""

import logging
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.errors import PyMongoError

from bookstore_api.app.api.deps import get_book_service
from bookstore_api.app.core.db import ping
from bookstore_api.app.services.book_service import BookService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(service: BookService = Depends(get_book_service)) -> Dict[str, str]:
    """Report whether MongoDB answers a ping.

    Returns 503 when the server cannot be reached.
    """
    try:
        await ping(service.collection)
    except PyMongoError as e:
        logger.warning("Health check failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Database unavailable"
        ) from e
    return {"status": "healthy", "database": "connected"}
