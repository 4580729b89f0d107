"""
Pagination Resolver

Offset pagination shared by the author and book stores.

Pages are 0-indexed:
    page=0, limit=10 -> rows 0..9
    page=2, limit=5  -> rows 10..14

A list call returns an envelope:
    {"items": [...], "meta": {"total": 12, "page": 2, "limit": 5, "totalPages": 3}}
"""

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

T = TypeVar("T")

DEFAULT_PAGE = 0
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Largest OFFSET the databases accept (signed 64-bit integer)
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageParams:
    """
    Normalized page/limit pair.

    Build it with PageParams.resolve() when the values come from a client;
    it fills in defaults for missing values and enforces the upper bound.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError(f"page must be >= 0, got {self.page}")
        if self.limit < 1:
            raise ValueError(f"limit must be >= 1, got {self.limit}")
        if self.skip > MAX_OFFSET:
            raise ValueError(f"page {self.page} is too large for limit {self.limit}")

    @classmethod
    def resolve(
        cls,
        page: int | None = None,
        limit: int | None = None,
        *,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> "PageParams":
        """
        Apply defaults and bounds to optional client values.

        Raises:
            ValueError: If page is negative or limit is outside 1..max_limit
        """
        page = DEFAULT_PAGE if page is None else page
        limit = default_limit if limit is None else limit
        if limit > max_limit:
            raise ValueError(f"limit must be <= {max_limit}, got {limit}")
        return cls(page=page, limit=limit)

    @property
    def skip(self) -> int:
        """Number of rows to skip (SQL OFFSET)."""
        return self.page * self.limit


@dataclass(frozen=True)
class PageMeta:
    total: int
    page: int
    limit: int
    total_pages: int


@dataclass
class Page(Generic[T]):
    """One page of results plus the metadata describing it."""

    items: Sequence[T] = field(default_factory=list)
    meta: PageMeta = field(default_factory=lambda: PageMeta(0, DEFAULT_PAGE, DEFAULT_LIMIT, 0))


def total_pages(total: int, limit: int) -> int:
    """ceil(total / limit); an empty table has zero pages."""
    return math.ceil(total / limit)


def paginate(db: Session, stmt: Select, params: PageParams) -> Page:
    """
    Run ``stmt`` for one page and count every row it would return.

    The count ignores ORDER BY and loader options. Items keep whatever
    ordering and eager loading ``stmt`` carries.

    Args:
        db: Database session
        stmt: SELECT of a single ORM entity
        params: Resolved page/limit

    Returns:
        Page with at most ``params.limit`` items
    """
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = db.execute(count_stmt).scalar() or 0

    items = db.execute(
        stmt.offset(params.skip).limit(params.limit)
    ).scalars().all()

    return Page(
        items=items,
        meta=PageMeta(
            total=total,
            page=params.page,
            limit=params.limit,
            total_pages=total_pages(total, params.limit),
        ),
    )
