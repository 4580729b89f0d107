"""
Book Store

CRUD over book rows. Every book must point at an existing author, so create
and update resolve the author through the AuthorStore before writing
anything. Both steps run in the same session transaction and are committed
together.
"""

import logging
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from library_api.exceptions import NotFoundError
from library_api.models import Book
from library_api.schemas import BookCreate, BookUpdate
from library_api.services.authors import AuthorStore
from library_api.services.pagination import Page, PageParams, paginate
from library_api.services.patching import merge_patch

logger = logging.getLogger(__name__)

BOOK_FIELDS = ("title", "author_id", "page_count", "release_date")


class BookStore:
    """Record store for books."""

    def __init__(self, db: Session, authors: AuthorStore) -> None:
        self.db = db
        self.authors = authors

    def list(self, params: PageParams) -> Page[Book]:
        """One page of books, newest first, each with its author."""
        stmt = (
            select(Book)
            .options(selectinload(Book.author))
            .order_by(Book.created_at.desc(), Book.id)
        )
        return paginate(self.db, stmt, params)

    def list_by_author(self, author_id: UUID, params: PageParams) -> Page[Book]:
        """
        One page of the books written by a single author.

        Raises:
            NotFoundError: If the author does not exist
        """
        self.authors.get(author_id)

        stmt = (
            select(Book)
            .options(selectinload(Book.author))
            .where(Book.author_id == author_id)
            .order_by(Book.release_date, Book.id)
        )
        return paginate(self.db, stmt, params)

    def get(self, book_id: UUID) -> Book:
        """
        Get a book by ID with its author loaded.

        Raises:
            NotFoundError: If no book has this ID
        """
        stmt = (
            select(Book)
            .options(selectinload(Book.author))
            .where(Book.id == book_id)
        )
        book = self.db.execute(stmt).scalar_one_or_none()

        if book is None:
            logger.debug("Book %s not found", book_id)
            raise NotFoundError("Book", book_id)
        return book

    def create(self, data: BookCreate) -> Book:
        """
        Create a book for an existing author.

        Raises:
            NotFoundError: If author_id does not match an author; nothing
                is inserted in that case
        """
        author = self.authors.get(data.author_id)

        book = Book(
            title=data.title,
            page_count=data.page_count,
            release_date=data.release_date,
            author=author,
        )

        self.db.add(book)
        self.db.commit()

        logger.info("Created book %s for author %s", book.id, data.author_id)
        return self.get(book.id)

    def update(self, book_id: UUID, patch: BookUpdate) -> Book:
        """
        Apply the fields present in ``patch`` to an existing book.

        A supplied author_id is resolved before anything is written, so a
        bad reference leaves the book exactly as it was.

        Raises:
            NotFoundError: If the book, or the new author, does not exist
        """
        book = self.get(book_id)

        if patch.author_id is not None:
            self.authors.get(patch.author_id)

        values = merge_patch(book, patch, BOOK_FIELDS)

        self.db.execute(
            update(Book).where(Book.id == book.id).values(**values)
        )
        self.db.commit()

        logger.info("Updated book %s", book_id)
        return self.get(book_id)

    def delete(self, book_id: UUID) -> None:
        """
        Remove a book.

        Raises:
            NotFoundError: If no book has this ID
        """
        book = self.get(book_id)
        self.db.delete(book)
        self.db.commit()

        logger.info("Deleted book %s", book_id)
