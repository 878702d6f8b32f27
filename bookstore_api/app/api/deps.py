"""
Shared dependencies for API routes.

``get_book_service`` hands out the ``BookService`` instance created in
the application lifespan; tests can inject their own service through
``create_app(book_service=...)``.  ``valid_book_id`` rejects path
identifiers that are not MongoDB ObjectIds before any lookup happens.
"""

import re

from fastapi import HTTPException, Path, Request, status

from bookstore_api.app.schemas.book import BOOK_ID_PATTERN
from bookstore_api.app.services.book_service import BookService

_book_id_re = re.compile(BOOK_ID_PATTERN)


def get_book_service(request: Request) -> BookService:
    """Return the service bound to the running application."""
    return request.app.state.book_service


def valid_book_id(
    book_id: str = Path(..., description="24 character hexadecimal book id"),
) -> str:
    """Return ``book_id`` unchanged or raise HTTP 400 if it is malformed."""
    if not _book_id_re.fullmatch(book_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid book id")
    return book_id
