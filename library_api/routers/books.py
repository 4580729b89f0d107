"""
Books Router

Complete CRUD endpoints for books.

Demonstrates:
- Pagination with the {items, meta} envelope
- Resolving the author reference on create and update
- 201 Created / 204 No Content status codes
- OpenAPI documentation for every route
"""

from uuid import UUID

from fastapi import APIRouter, status

from library_api.dependencies import Books, Pagination
from library_api.schemas import (
    BookCreate,
    BookListResponse,
    BookResponse,
    BookUpdate,
    PageMetaResponse,
)

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"description": "Invalid UUID format or invalid input"},
        404: {"description": "Book or author not found"},
    },
)


# =============================================================================
# CRUD Endpoints
# =============================================================================
@router.get(
    "/",
    response_model=BookListResponse,
    summary="List all books",
    description="Get a paginated list of books, each with its author.",
)
def list_books(
    books: Books,
    pagination: Pagination,
) -> BookListResponse:
    """
    List all books with pagination.

    Returns:
        Paginated list of books with metadata
    """
    page = books.list(pagination)
    return BookListResponse(
        items=[BookResponse.model_validate(book) for book in page.items],
        meta=PageMetaResponse.model_validate(page.meta),
    )


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    description="Retrieve a single book with its author.",
)
def get_book(
    book_id: UUID,
    books: Books,
) -> BookResponse:
    """
    Get a single book by its ID.

    Raises:
        NotFoundError: 404 if book not found
    """
    return BookResponse.model_validate(books.get(book_id))


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a new book for an existing author.",
)
def create_book(
    book_data: BookCreate,
    books: Books,
) -> BookResponse:
    """
    Create a new book.

    Raises:
        NotFoundError: 404 if authorId does not match an author
    """
    return BookResponse.model_validate(books.create(book_data))


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Update a book. Only the fields sent are changed.",
)
def update_book(
    book_id: UUID,
    book_data: BookUpdate,
    books: Books,
) -> BookResponse:
    """
    Update an existing book.

    Uses PUT with optional fields (PATCH-like behavior).

    Raises:
        NotFoundError: 404 if the book or the new author is not found
    """
    return BookResponse.model_validate(books.update(book_id, book_data))


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book from the database.",
)
def delete_book(
    book_id: UUID,
    books: Books,
) -> None:
    """
    Delete a book.

    Returns 204 No Content on success.
    """
    books.delete(book_id)
