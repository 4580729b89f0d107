"""
Author Pydantic Schemas

Request and response shapes for /authors. JSON names are camelCase
(firstName, lastName, createdAt) via CamelModel.
"""

from pydantic import ConfigDict, Field, field_validator

from library_api.schemas.common import CamelModel, PageMetaResponse
from library_api.schemas.nested import AuthorSummary, BookSummary


def _clean_name(v: str | None, label: str) -> str | None:
    if v is None:
        return v
    if not v.strip():
        raise ValueError(f"{label} cannot be empty or whitespace")
    return v.strip()


class AuthorCreate(CamelModel):
    """
    Schema for creating a new author.

    Example request body:
    {"firstName": "John", "lastName": "Doe"}
    """

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's first name",
        examples=["John", "Jane"],
    )

    last_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's last name",
        examples=["Doe", "Austen"],
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def names_must_not_be_blank(cls, v: str, info) -> str:
        """Reject whitespace-only names and strip surrounding spaces."""
        return _clean_name(v, info.field_name)


class AuthorUpdate(CamelModel):
    """
    Schema for updating an existing author.

    Every field is optional; only the ones sent are changed. Sending an
    explicit null is rejected because both columns are required.
    """

    first_name: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Author's first name",
    )

    last_name: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Author's last name",
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def names_must_not_be_blank(cls, v: str | None, info) -> str:
        """Validate name if provided."""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return _clean_name(v, info.field_name)


class AuthorResponse(AuthorSummary):
    """
    Author returned by the API, with the books they wrote.

    Usage:
        author = store.get(author_id)
        return AuthorResponse.model_validate(author)
    """

    books: list[BookSummary] = Field(
        default=[],
        description="Books written by this author",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "firstName": "John",
                "lastName": "Doe",
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
                "books": [],
            }
        },
    )


class AuthorListResponse(CamelModel):
    """Paginated author list: {"items": [...], "meta": {...}}."""

    items: list[AuthorResponse] = Field(
        ...,
        description="Authors on this page",
    )
    meta: PageMetaResponse = Field(
        ...,
        description="Pagination metadata",
    )
