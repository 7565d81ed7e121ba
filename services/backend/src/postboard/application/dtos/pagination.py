"""Offset pagination.

Page numbers start at 1 and are capped at MAX_PAGE so the offset always
fits a 64-bit column. Absent, zero, or negative values fall back to
page 1 and the configured default size; sizes above the maximum are
clamped. The offset of a page is ``(page - 1) * size``.
"""

import math
from dataclasses import dataclass
from typing import Optional

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
MAX_PAGE = 1_000_000


@dataclass(frozen=True)
class PageRequest:
    """A resolved page/size pair."""

    page: int
    size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size

    @classmethod
    def resolve(
        cls,
        page: Optional[int] = None,
        size: Optional[int] = None,
        default_size: int = DEFAULT_PAGE_SIZE,
        max_size: int = MAX_PAGE_SIZE,
    ) -> "PageRequest":
        resolved_page = page if page is not None and page > 0 else DEFAULT_PAGE
        resolved_size = size if size is not None and size > 0 else default_size
        return cls(
            page=min(resolved_page, MAX_PAGE),
            size=min(resolved_size, max_size),
        )


@dataclass(frozen=True)
class PageMeta:
    """Pagination metadata for a listing.

    ``last_page`` is 0 for an empty collection; ``prev_page`` and
    ``next_page`` are None at the respective ends.
    """

    total: int
    current_page: int
    total_per_page: int
    last_page: int
    prev_page: Optional[int]
    next_page: Optional[int]

    @classmethod
    def build(cls, total: int, request: PageRequest) -> "PageMeta":
        last_page = math.ceil(total / request.size) if total > 0 else 0
        current = request.page
        return cls(
            total=total,
            current_page=current,
            total_per_page=request.size,
            last_page=last_page,
            prev_page=current - 1 if current > 1 else None,
            next_page=current + 1 if current < last_page else None,
        )
