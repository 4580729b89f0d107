"""
Services Package

Business logic kept separate from HTTP handling:
- authors.py: AuthorStore, CRUD over authors
- books.py: BookStore, CRUD over books with author resolution
- pagination.py: page/limit resolution and the result envelope
- patching.py: merge of partial-update payloads onto stored rows
"""

from library_api.services.authors import AuthorStore
from library_api.services.books import BookStore
from library_api.services.pagination import Page, PageMeta, PageParams, paginate, total_pages
from library_api.services.patching import merge_patch

__all__ = [
    "AuthorStore",
    "BookStore",
    "Page",
    "PageMeta",
    "PageParams",
    "paginate",
    "total_pages",
    "merge_patch",
]
