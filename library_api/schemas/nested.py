"""
Nested Schemas

Compact views used when one entity is embedded inside the other:
- an author response lists its books as BookSummary
- a book response carries its author as AuthorSummary

Neither summary nests further, so responses never recurse.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from library_api.schemas.common import CamelModel


class AuthorSummary(CamelModel):
    """Author fields without the books relation."""

    id: UUID = Field(..., description="Unique identifier")
    first_name: str = Field(..., description="Author's first name")
    last_name: str = Field(..., description="Author's last name")
    created_at: datetime = Field(..., description="When the author was created")
    updated_at: datetime = Field(..., description="When the author was last updated")

    model_config = ConfigDict(from_attributes=True)


class BookSummary(CamelModel):
    """Book fields without the author relation."""

    id: UUID = Field(..., description="Unique identifier")
    title: str = Field(..., description="Book title")
    page_count: int = Field(..., description="Number of pages")
    release_date: date = Field(..., description="Date the book was released")
    author_id: UUID = Field(..., description="Author who wrote the book")
    created_at: datetime = Field(..., description="When the book was created")
    updated_at: datetime = Field(..., description="When the book was last updated")

    model_config = ConfigDict(from_attributes=True)
