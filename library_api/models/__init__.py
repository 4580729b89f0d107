"""
SQLAlchemy Models Package

Model Relationships:
- Author <-> Book: One-to-Many (an author writes many books,
                   every book has exactly one author)

Import all models here to:
1. Make them available as: from library_api.models import Author, Book
2. Ensure Alembic discovers them for migrations
"""

# The order matters for SQLAlchemy to resolve relationships
from library_api.models.author import Author
from library_api.models.book import Book

__all__ = [
    "Author",
    "Book",
]
