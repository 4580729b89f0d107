"""
Shared Schema Building Blocks

- CamelModel: base class giving every schema camelCase JSON names
  (firstName, pageCount, totalPages) while Python code keeps snake_case.
- PageMetaResponse: the "meta" half of a paginated envelope.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema with camelCase aliases.

    populate_by_name=True also accepts the snake_case names, so both
    {"firstName": "Jane"} and {"first_name": "Jane"} validate.
    FastAPI serializes responses by alias, so output is always camelCase.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PageMetaResponse(CamelModel):
    """Pagination metadata returned next to the items of a list response."""

    total: int = Field(..., ge=0, description="Total number of rows")
    page: int = Field(..., ge=0, description="Current page number (0-indexed)")
    limit: int = Field(..., ge=1, description="Number of items per page")
    total_pages: int = Field(..., ge=0, description="Total number of pages")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {"total": 12, "page": 2, "limit": 5, "totalPages": 3}
        },
    )
