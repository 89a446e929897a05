"""
Fixed-size page slicing for lawyer results
"""

import math
from dataclasses import dataclass, field
from typing import List, Sequence

from lawyermatch.models.lawyer import Lawyer

DEFAULT_PAGE_SIZE = 9


@dataclass
class LawyerPage:
    """One page of an ordered result set plus page-count metadata"""

    items: List[Lawyer] = field(default_factory=list)
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_items: int = 0
    total_pages: int = 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def count_pages(total_items: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    return math.ceil(total_items / page_size)


def paginate(
    items: Sequence[Lawyer], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE
) -> LawyerPage:
    """
    Slice ``items`` to the 1-based ``page``

    A page past the end yields an empty page rather than an error.

    Raises:
        ValueError: If page or page_size is below 1
    """
    if page < 1:
        raise ValueError("page must be at least 1")
    total_pages = count_pages(len(items), page_size)

    start = (page - 1) * page_size
    return LawyerPage(
        items=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_items=len(items),
        total_pages=total_pages,
    )


def is_valid_page(page: int, total_pages: int) -> bool:
    """Whether ``page`` is a navigable page; page 1 always is"""
    return 1 <= page <= max(total_pages, 1)


def page_window(current: int, total_pages: int, width: int = 5) -> List[int]:
    """
    Page numbers to offer as navigation buttons

    Shows every page when they fit, otherwise a run of ``width`` pages
    anchored to the start, the end, or centered on ``current``.
    """
    if total_pages <= width:
        return list(range(1, total_pages + 1))

    half = width // 2
    if current <= half + 1:
        first = 1
    elif current >= total_pages - half:
        first = total_pages - width + 1
    else:
        first = current - half
    return list(range(first, first + width))
