"""Seed the books collection with a small sample catalogue.

Uses the same settings as the API (``MONGODB_URL``,
``MONGODB_DATABASE``, ``MONGODB_COLLECTION``) and inserts each book
through ``BookService`` so that ids are assigned exactly as they are
for books created over HTTP.

Usage:
    python seed_books.py [--drop]
"""
import argparse
import asyncio
import logging
from typing import List

from bookstore_api.app.core.config import settings
from bookstore_api.app.core.db import close_client, create_client, get_books_collection
from bookstore_api.app.core.logging_config import setup_logging
from bookstore_api.app.schemas.book import Book
from bookstore_api.app.services.book_service import BookService

logger = logging.getLogger("bookstore_api.seed_books")

SAMPLE_BOOKS: List[Book] = [
    Book(book_name="Design Patterns", price=54.93, category="Computers", author="Ralph Johnson"),
    Book(book_name="Clean Code", price=43.15, category="Computers", author="Robert C. Martin"),
]


async def seed(service: BookService, drop: bool = False) -> List[Book]:
    """Insert ``SAMPLE_BOOKS`` and return them with their new ids.

    With ``drop`` set, every existing document is removed first.
    """
    if drop:
        removed = await service.delete_all_books()
        logger.info("Removed %s existing books", removed)
    created = []
    for book in SAMPLE_BOOKS:
        created.append(await service.create_book(book))
    return created


async def main(drop: bool) -> None:
    client = create_client(settings)
    try:
        service = BookService(get_books_collection(client, settings))
        for book in await seed(service, drop=drop):
            print(f"{book.id}  {book.book_name}")
    finally:
        await close_client(client)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Insert sample books into MongoDB.")
    parser.add_argument(
        "--drop", action="store_true", help="delete all existing books before seeding"
    )
    args = parser.parse_args()
    setup_logging(settings.log_level)
    asyncio.run(main(args.drop))
