"""
pytest Fixtures for Library API Tests

Shared fixtures used across all test files.

FIXTURE SCOPES:
- session scope for the engine (expensive to create)
- function scope for sessions (isolation between tests)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app.
# Settings are read once at import time.
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_SYNCHRONIZE"] = "false"
os.environ["ENVIRONMENT"] = "development"

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from library_api.database import build_engine, create_tables, drop_tables, get_db
from library_api.main import app
from library_api.models import Author, Book
from library_api.services import AuthorStore, BookStore

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps tests fast and self-contained. build_engine turns
# on PRAGMA foreign_keys so the author reference is enforced like on
# PostgreSQL.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole session.
    Without it, the in-memory database would disappear between connections.
    """
    engine = build_engine("sqlite://", poolclass=StaticPool)

    create_tables(bind=engine)

    yield engine

    drop_tables(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is joined to an outer transaction that is rolled back
    afterwards, so commits made by the stores never leak between tests.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client that uses the test database.

    get_db is overridden, so every store built for a request shares the
    test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def author_store(db_session: Session) -> AuthorStore:
    return AuthorStore(db_session)


@pytest.fixture
def book_store(db_session: Session, author_store: AuthorStore) -> BookStore:
    return BookStore(db_session, author_store)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(first_name="Stephen", last_name="King")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def second_author(db_session: Session) -> Author:
    """Create another author for reassignment scenarios."""
    author = Author(first_name="Agatha", last_name="Christie")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book(db_session: Session, sample_author: Author) -> Book:
    """Create a sample book written by sample_author."""
    book = Book(
        title="The Shining",
        page_count=447,
        release_date=date(1977, 1, 28),
        author=sample_author,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session, sample_author: Author) -> list[Book]:
    """Create 12 books for pagination testing."""
    books = []
    for i in range(12):
        book = Book(
            title=f"Test Book {i + 1}",
            page_count=100 + i * 10,
            release_date=date(2000 + i, 1, 1),
            author=sample_author,
        )
        books.append(book)
        db_session.add(book)

    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books


@pytest.fixture
def multiple_authors(db_session: Session) -> list[Author]:
    """Create 12 authors for pagination testing."""
    authors = [
        Author(first_name=f"First{i:02d}", last_name=f"Last{i:02d}")
        for i in range(12)
    ]
    db_session.add_all(authors)
    db_session.commit()
    for author in authors:
        db_session.refresh(author)
    return authors
