"""
Book Pydantic Schemas

Handles:
- The author reference (authorId on input, nested author on output)
- Page count validation (must be positive)
- Pagination envelope for list responses
"""

from datetime import date
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from library_api.schemas.common import CamelModel, PageMetaResponse
from library_api.schemas.nested import AuthorSummary, BookSummary

# page_count is stored in a signed 32-bit INTEGER column
MAX_PAGE_COUNT = 2**31 - 1


class BookCreate(CamelModel):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "The Shining",
        "authorId": "123e4567-e89b-12d3-a456-426614174000",
        "pageCount": 447,
        "releaseDate": "1977-01-28"
    }
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["The Great Gatsby"],
    )

    author_id: UUID = Field(
        ...,
        description="UUID of the author",
        examples=["123e4567-e89b-12d3-a456-426614174000"],
    )

    page_count: int = Field(
        ...,
        gt=0,  # gt = greater than
        le=MAX_PAGE_COUNT,  # INTEGER column bound
        description="Number of pages",
        examples=[300],
    )

    release_date: date = Field(
        ...,
        description="Date the book was released",
        examples=["2023-01-01"],
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class BookUpdate(CamelModel):
    """
    Schema for updating an existing book.

    All fields are optional; only the ones sent are changed. A new authorId
    must point at an existing author.
    """

    title: str | None = Field(
        default=None,
        min_length=1,
        max_length=500,
        description="Book title",
    )

    author_id: UUID | None = Field(
        default=None,
        description="UUID of the new author",
    )

    page_count: int | None = Field(
        default=None,
        gt=0,
        le=MAX_PAGE_COUNT,
        description="Number of pages",
    )

    release_date: date | None = Field(
        default=None,
        description="Date the book was released",
    )

    @field_validator("title", "author_id", "page_count", "release_date")
    @classmethod
    def must_not_be_null(cls, v, info):
        """Every book column is required, so an explicit null is invalid."""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str | None) -> str | None:
        """Validate title if provided."""
        if v is not None and not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip() if v else v


class BookResponse(BookSummary):
    """
    Book returned by the API with its author embedded.
    """

    author: AuthorSummary = Field(..., description="Author of the book")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                "title": "The Great Gatsby",
                "pageCount": 300,
                "releaseDate": "2023-01-01",
                "authorId": "123e4567-e89b-12d3-a456-426614174000",
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
                "author": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "firstName": "John",
                    "lastName": "Doe",
                    "createdAt": "2024-01-15T10:30:00Z",
                    "updatedAt": "2024-01-15T10:30:00Z",
                },
            }
        },
    )


class BookListResponse(CamelModel):
    """
    Paginated book list: {"items": [...], "meta": {...}}.
    """

    items: list[BookResponse] = Field(
        ...,
        description="Books on this page",
    )
    meta: PageMetaResponse = Field(
        ...,
        description="Pagination metadata",
    )
