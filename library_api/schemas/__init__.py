"""
Pydantic Schemas Package

Request/response validation, kept separate from the SQLAlchemy models.

Schema Naming Convention:
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxSummary: Compact view embedded inside the other entity
- XxxResponse: Fields returned in API responses
- XxxListResponse: Paginated envelope of XxxResponse
"""

from library_api.schemas.author import (
    AuthorCreate,
    AuthorListResponse,
    AuthorResponse,
    AuthorUpdate,
)
from library_api.schemas.book import (
    BookCreate,
    BookListResponse,
    BookResponse,
    BookUpdate,
)
from library_api.schemas.common import CamelModel, PageMetaResponse
from library_api.schemas.nested import AuthorSummary, BookSummary

__all__ = [
    "CamelModel",
    "PageMetaResponse",
    # Author schemas
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorSummary",
    "AuthorResponse",
    "AuthorListResponse",
    # Book schemas
    "BookCreate",
    "BookUpdate",
    "BookSummary",
    "BookResponse",
    "BookListResponse",
]
