"""
Service layer for books.

``BookService`` is the only component that talks to the books
collection.  Each method performs exactly one document operation.
Lookups by a well‑formed identifier that matches nothing return
``None``; mutations that match nothing return a count of zero.
Translating either into an HTTP status is left to the API layer.

Identifiers are expected to be validated before they reach this
layer (see ``api.deps.valid_book_id``); a malformed identifier raises
``bson.errors.InvalidId``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from bson import ObjectId
from pymongo.asynchronous.collection import AsyncCollection

from bookstore_api.app.schemas.book import Book

logger = logging.getLogger(__name__)


class BookService:
    """Data access for the books collection.

    The collection handle is created once at startup and shared by
    all requests; the service itself keeps no other state.
    """

    def __init__(self, collection: AsyncCollection) -> None:
        self.collection = collection

    async def list_books(self) -> List[Book]:
        """Return every book in the collection, in no particular order."""
        books: List[Book] = []
        async for document in self.collection.find({}):
            books.append(Book.from_document(document))
        return books

    async def get_book(self, book_id: str) -> Optional[Book]:
        """Return the book with ``book_id`` or ``None`` if it does not exist."""
        document = await self.collection.find_one({"_id": ObjectId(book_id)})
        if document is None:
            return None
        return Book.from_document(document)

    async def create_book(self, book: Book) -> Book:
        """Insert ``book`` and return it with the identifier assigned by the store.

        Any identifier already present on ``book`` is ignored.
        """
        result = await self.collection.insert_one(book.to_document())
        book_id = str(result.inserted_id)
        logger.info("Created book %s", book_id)
        return book.model_copy(update={"id": book_id})

    async def replace_book(self, book_id: str, book: Book) -> int:
        """Overwrite every field of the book with ``book_id``.

        Returns the number of matched documents: ``1`` on success and
        ``0`` if no such book exists, in which case nothing changes.
        """
        result = await self.collection.replace_one(
            {"_id": ObjectId(book_id)}, book.to_document()
        )
        if result.matched_count:
            logger.info("Replaced book %s", book_id)
        return result.matched_count

    async def delete_book(self, book_id: str) -> int:
        """Delete the book with ``book_id``.

        Returns the number of deleted documents, ``0`` if no such book
        exists.
        """
        result = await self.collection.delete_one({"_id": ObjectId(book_id)})
        if result.deleted_count:
            logger.info("Deleted book %s", book_id)
        return result.deleted_count

    async def delete_all_books(self) -> int:
        """Delete every book and return how many were removed."""
        result = await self.collection.delete_many({})
        logger.info("Deleted all %s books", result.deleted_count)
        return result.deleted_count
