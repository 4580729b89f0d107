"""
Domain Exceptions

Errors raised by the record stores. They know nothing about HTTP; the
handlers registered in main.py translate them into responses.
"""

from uuid import UUID


class LibraryError(Exception):
    """Base class for errors raised by the record stores."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(LibraryError):
    """
    A referenced author or book does not exist.

    Surfaced to clients as 404 Not Found.
    """

    def __init__(self, entity: str, entity_id: UUID | str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class ConflictError(LibraryError):
    """
    The operation would break a relationship between rows.

    Raised when deleting an author that still has books.
    Surfaced to clients as 409 Conflict.
    """

    pass
