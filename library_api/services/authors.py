"""
Author Store

CRUD over author rows. Every read eagerly loads the author's books with
selectinload so responses can list them without extra queries.

The session is passed to the constructor:

    store = AuthorStore(db)
    author = store.get(author_id)
"""

import logging
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from library_api.exceptions import ConflictError, NotFoundError
from library_api.models import Author
from library_api.schemas import AuthorCreate, AuthorUpdate
from library_api.services.pagination import Page, PageParams, paginate
from library_api.services.patching import merge_patch

logger = logging.getLogger(__name__)

AUTHOR_FIELDS = ("first_name", "last_name")


class AuthorStore:
    """Record store for authors."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self, params: PageParams) -> Page[Author]:
        """One page of authors, ordered by last name then first name."""
        stmt = (
            select(Author)
            .options(selectinload(Author.books))
            .order_by(Author.last_name, Author.first_name, Author.id)
        )
        return paginate(self.db, stmt, params)

    def get(self, author_id: UUID) -> Author:
        """
        Get an author by ID with books loaded.

        Raises:
            NotFoundError: If no author has this ID
        """
        stmt = (
            select(Author)
            .options(selectinload(Author.books))
            .where(Author.id == author_id)
        )
        author = self.db.execute(stmt).scalar_one_or_none()

        if author is None:
            logger.debug("Author %s not found", author_id)
            raise NotFoundError("Author", author_id)
        return author

    def create(self, data: AuthorCreate) -> Author:
        """Persist a new author; id and timestamps come back filled in."""
        author = Author(
            first_name=data.first_name,
            last_name=data.last_name,
        )

        self.db.add(author)
        self.db.commit()

        logger.info("Created author %s (%s)", author.id, author.full_name)
        return self.get(author.id)

    def update(self, author_id: UUID, patch: AuthorUpdate) -> Author:
        """
        Apply the fields present in ``patch`` to an existing author.

        Raises:
            NotFoundError: If no author has this ID
        """
        author = self.get(author_id)
        values = merge_patch(author, patch, AUTHOR_FIELDS)

        self.db.execute(
            update(Author).where(Author.id == author.id).values(**values)
        )
        self.db.commit()

        logger.info("Updated author %s", author_id)
        return self.get(author_id)

    def delete(self, author_id: UUID) -> None:
        """
        Remove an author that has no books.

        Raises:
            NotFoundError: If no author has this ID
            ConflictError: If books still reference the author
        """
        author = self.get(author_id)

        if author.books:
            raise ConflictError(
                f"Author with id {author_id} still has {len(author.books)} "
                "book(s); delete or reassign them first"
            )

        self.db.delete(author)
        self.db.commit()

        logger.info("Deleted author %s", author_id)
