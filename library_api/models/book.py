"""
Book Model

Each book belongs to exactly one author through a non-nullable foreign key.

ON DELETE RESTRICT
==================
Deleting an author that still has books is refused by the database. The
application checks first and answers 409 Conflict, so the constraint is the
last line rather than the only line.
"""

import uuid
from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.database import Base

if TYPE_CHECKING:
    from library_api.models.author import Author


class Book(Base):
    """
    Book model representing books in the library.

    Table: books

    Fields:
    - title: Book title (required)
    - page_count: Number of pages (positive)
    - release_date: When the book was released
    - author_id: Owning author (required, must exist)

    Example:
        book = Book(
            title="Pride and Prejudice",
            page_count=432,
            release_date=date(1813, 1, 28),
            author=jane_austen,
        )
    """

    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("page_count > 0", name="ck_books_page_count_positive"),
    )

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    page_count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Number of pages in the book"
    )

    # Date (not DateTime) because only the day matters
    release_date: Mapped[date] = mapped_column(
        Date,
        index=True,
        nullable=False,
        comment="Date the book was released"
    )

    # -------------------------------------------------------------------------
    # Foreign Keys
    # -------------------------------------------------------------------------
    author_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("authors.id", ondelete="RESTRICT"),
        index=True,
        nullable=False,
        comment="Author who wrote the book"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # Many-to-one: book.author -> Author, author.books -> list of books
    author: Mapped["Author"] = relationship(
        "Author",
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author_id={self.author_id})"
