"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

The stores themselves take their collaborators through the constructor
(AuthorStore(db), BookStore(db, authors)); the functions here only build
them per request so routes can declare what they need:

    def get_book(book_id: UUID, books: Books): ...
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from library_api.config import get_settings
from library_api.database import get_db
from library_api.services import AuthorStore, BookStore, PageParams
from library_api.services.pagination import DEFAULT_PAGE, MAX_OFFSET

settings = get_settings()

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Pagination Parameters
# =============================================================================
def get_page_params(
    page: int = Query(
        default=DEFAULT_PAGE,
        ge=0,
        # page * limit must stay a valid SQL OFFSET (signed 64-bit)
        le=MAX_OFFSET // settings.max_page_size,
        description="Page number (0-indexed)",
        examples=[0, 1, 2],
    ),
    limit: int = Query(
        default=settings.default_page_size,
        ge=1,
        le=settings.max_page_size,  # Limit to prevent abuse
        description=f"Number of items per page (max {settings.max_page_size})",
        examples=[10, 25, 50],
    ),
) -> PageParams:
    """
    Pagination query parameters for list endpoints.

        GET /books/?page=2&limit=20

    Out-of-range values never reach this function; FastAPI rejects them
    and the validation handler answers 400.
    """
    return PageParams.resolve(
        page,
        limit,
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )


Pagination = Annotated[PageParams, Depends(get_page_params)]


# =============================================================================
# Record Stores
# =============================================================================
def get_author_store(db: DbSession) -> AuthorStore:
    """AuthorStore bound to the request's session."""
    return AuthorStore(db)


Authors = Annotated[AuthorStore, Depends(get_author_store)]


def get_book_store(db: DbSession, authors: Authors) -> BookStore:
    """
    BookStore bound to the request's session.

    FastAPI caches get_db per request, so both stores share one session
    and one transaction.
    """
    return BookStore(db, authors)


Books = Annotated[BookStore, Depends(get_book_store)]
