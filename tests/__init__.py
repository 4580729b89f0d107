"""
Test Suite for Library API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_authors.py: Tests for /api/v1/authors endpoints
- test_books.py: Tests for /api/v1/books endpoints
- test_main.py: Root/health endpoints, error handling, settings
- test_pagination.py: Pagination resolver
- test_stores.py: AuthorStore, BookStore and merge_patch without HTTP

Running Tests:
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=library_api --cov-report=html

    # Run specific file
    pytest tests/test_books.py
"""
