"""
Book endpoints.

Five routes map one to one onto ``BookService``.  Not‑found outcomes
are answered with an empty 404 response.  ``PUT`` and ``DELETE`` first
check that the book exists so that a 204 always means something was
actually changed; if the book disappears between that check and the
write, the zero match count from the store is reported as 404 too.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from bookstore_api.app.api.deps import get_book_service, valid_book_id
from bookstore_api.app.schemas.book import Book
from bookstore_api.app.services.book_service import BookService

router = APIRouter()

_not_found = {status.HTTP_404_NOT_FOUND: {"description": "Book not found"}}
_bad_id = {status.HTTP_400_BAD_REQUEST: {"description": "Malformed book id"}}


@router.get("", response_model=List[Book])
async def list_books(service: BookService = Depends(get_book_service)) -> List[Book]:
    """Return all books.  The list is empty when the collection is."""
    return await service.list_books()


@router.get("/{book_id}", response_model=Book, responses={**_not_found, **_bad_id})
async def get_book(
    book_id: str = Depends(valid_book_id),
    service: BookService = Depends(get_book_service),
):
    """Retrieve a single book by its id."""
    book = await service.get_book(book_id)
    if book is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return book


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
async def create_book(
    book: Book,
    request: Request,
    response: Response,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Create a book.

    The id is assigned by the store; an ``Id`` sent in the body is
    ignored.  The ``Location`` header points at the new book.
    """
    created = await service.create_book(book)
    response.headers["Location"] = str(request.url_for("get_book", book_id=created.id))
    return created


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_not_found, **_bad_id},
)
async def update_book(
    book: Book,
    book_id: str = Depends(valid_book_id),
    service: BookService = Depends(get_book_service),
) -> Response:
    """Replace every field of an existing book."""
    if await service.get_book(book_id) is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    if not await service.replace_book(book_id, book):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_not_found, **_bad_id},
)
async def delete_book(
    book_id: str = Depends(valid_book_id),
    service: BookService = Depends(get_book_service),
) -> Response:
    """Delete a book."""
    if await service.get_book(book_id) is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    if not await service.delete_book(book_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
