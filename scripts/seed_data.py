#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample authors and books for development.

USAGE:
    # From the project root with the package installed
    python scripts/seed_data.py

    # Keep existing rows instead of clearing them first
    python scripts/seed_data.py --keep

This script:
1. Connects to the database using app settings
2. Clears existing data (unless --keep)
3. Creates sample authors
4. Creates books, each linked to its author
"""

import argparse
from datetime import date

from sqlalchemy import delete
from sqlalchemy.orm import Session

from library_api.database import SessionLocal, create_tables
from library_api.models import Author, Book


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    # Books first: the foreign key restricts author deletes
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.commit()
    print("Data cleared.")


def create_authors(db: Session) -> list[Author]:
    """Create sample authors."""
    print("Creating authors...")
    authors_data = [
        {"first_name": "George R.R.", "last_name": "Martin"},
        {"first_name": "Jane", "last_name": "Austen"},
        {"first_name": "Stephen", "last_name": "King"},
        {"first_name": "Agatha", "last_name": "Christie"},
    ]

    authors = [Author(**data) for data in authors_data]
    db.add_all(authors)
    db.commit()
    for author in authors:
        db.refresh(author)

    print(f"Created {len(authors)} authors.")
    return authors


def create_books(db: Session, authors: list[Author]) -> list[Book]:
    """Create sample books; author_index points into ``authors``."""
    print("Creating books...")

    books_data = [
        {"title": "A Game of Thrones", "author_index": 0, "page_count": 694, "release_date": date(1996, 8, 1)},
        {"title": "A Clash of Kings", "author_index": 0, "page_count": 768, "release_date": date(1998, 11, 16)},
        {"title": "Pride and Prejudice", "author_index": 1, "page_count": 432, "release_date": date(1813, 1, 28)},
        {"title": "The Shining", "author_index": 2, "page_count": 447, "release_date": date(1977, 1, 28)},
        {"title": "It", "author_index": 2, "page_count": 1138, "release_date": date(1986, 9, 15)},
        {"title": "Murder on the Orient Express", "author_index": 3, "page_count": 256, "release_date": date(1934, 1, 1)},
        {"title": "And Then There Were None", "author_index": 3, "page_count": 272, "release_date": date(1939, 11, 6)},
    ]

    books = []
    for data in books_data:
        author = authors[data.pop("author_index")]
        book = Book(**data, author=author)
        db.add(book)
        books.append(book)

    db.commit()
    for book in books:
        db.refresh(book)

    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    # Create tables if they don't exist
    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        authors = create_authors(db)
        books = create_books(db, authors)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Books: {len(books)}")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Seed the database with sample authors and books"
    )
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing rows instead of clearing them first",
    )
    args = parser.parse_args()

    seed_database(clear_existing=not args.keep)


if __name__ == "__main__":
    main()
