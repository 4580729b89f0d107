"""
Authors Router

CRUD endpoints for authors, plus the paginated list of an author's books.
Routes stay thin: validation is done by the schemas, the work by AuthorStore,
and NotFoundError/ConflictError are turned into 404/409 by the handlers in
main.py.
"""

from uuid import UUID

from fastapi import APIRouter, status

from library_api.dependencies import Authors, Books, Pagination
from library_api.schemas import (
    AuthorCreate,
    AuthorListResponse,
    AuthorResponse,
    AuthorUpdate,
    BookListResponse,
    BookResponse,
    PageMetaResponse,
)

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        400: {"description": "Invalid UUID format or invalid input"},
        404: {"description": "Author not found"},
    },
)


@router.get(
    "/",
    response_model=AuthorListResponse,
    summary="List all authors",
    description="Get a paginated list of authors, each with their books.",
)
def list_authors(
    authors: Authors,
    pagination: Pagination,
) -> AuthorListResponse:
    """List authors with pagination."""
    page = authors.list(pagination)
    return AuthorListResponse(
        items=[AuthorResponse.model_validate(a) for a in page.items],
        meta=PageMetaResponse.model_validate(page.meta),
    )


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
    description="Retrieve a single author with the books they wrote.",
)
def get_author(
    author_id: UUID,
    authors: Authors,
) -> AuthorResponse:
    """Get a single author by ID."""
    return AuthorResponse.model_validate(authors.get(author_id))


@router.get(
    "/{author_id}/books",
    response_model=BookListResponse,
    summary="Get books by author",
    description="Get a paginated list of the books written by one author.",
)
def get_author_books(
    author_id: UUID,
    books: Books,
    pagination: Pagination,
) -> BookListResponse:
    """Books of one author, oldest release first."""
    page = books.list_by_author(author_id, pagination)
    return BookListResponse(
        items=[BookResponse.model_validate(b) for b in page.items],
        meta=PageMetaResponse.model_validate(page.meta),
    )


@router.post(
    "/",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    description="Create a new author from a first and last name.",
)
def create_author(
    author_data: AuthorCreate,
    authors: Authors,
) -> AuthorResponse:
    """Create a new author."""
    return AuthorResponse.model_validate(authors.create(author_data))


@router.put(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Update an author",
    description="Update an author. Only the fields sent are changed.",
)
def update_author(
    author_id: UUID,
    author_data: AuthorUpdate,
    authors: Authors,
) -> AuthorResponse:
    """Update an existing author."""
    return AuthorResponse.model_validate(authors.update(author_id, author_data))


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    description="Delete an author who has no books.",
    responses={409: {"description": "Author still has books"}},
)
def delete_author(
    author_id: UUID,
    authors: Authors,
) -> None:
    """Delete an author."""
    authors.delete(author_id)
