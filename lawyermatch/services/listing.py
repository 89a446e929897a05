"""
Interactive lawyer listing state

LawyerListing holds what a browsing client has selected (filter panel,
quick practice-area chip, search term, sort order and current page) and
renders pages through the shared filter, sort and pagination modules.

Any change to the effective filter set sends the listing back to page 1.
Changing the sort order keeps the current page.
"""

import logging
from typing import Any, List, Optional, Union

from lawyermatch.models.lawyer import Lawyer, LawyerFilter, PracticeArea
from lawyermatch.services.filters import apply_filters, matches_practice_areas
from lawyermatch.services.lawyer_store import LawyerStore
from lawyermatch.services.pagination import (
    DEFAULT_PAGE_SIZE,
    LawyerPage,
    count_pages,
    is_valid_page,
    page_window,
    paginate,
)
from lawyermatch.services.sorting import SortOption, sort_lawyers

logger = logging.getLogger(__name__)

# Chips shown above the result grid; None stands for "All Areas"
QUICK_FILTER_AREAS = [
    PracticeArea.FAMILY_LAW,
    PracticeArea.CRIMINAL_DEFENSE,
    PracticeArea.IMMIGRATION_LAW,
    PracticeArea.PERSONAL_INJURY,
    PracticeArea.BUSINESS_LAW,
]


def default_filters() -> LawyerFilter:
    """Filter panel state before the user touches anything"""
    return LawyerFilter(
        practice_areas=[],
        min_rating=3,
        max_price=500,
        experience_levels=[],
        only_available=False,
        search_query="",
    )


class LawyerListing:
    """Browsing state over a LawyerStore"""

    def __init__(self, store: LawyerStore, page_size: int = DEFAULT_PAGE_SIZE):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.store = store
        self.page_size = page_size
        self.filters = default_filters()
        self.quick_area: Optional[PracticeArea] = None
        self.sort_by = SortOption.RELEVANCE
        self.page = 1

    # Filter transitions

    def update_filters(self, **changes: Any) -> None:
        """Merge filter panel changes, e.g. ``update_filters(min_rating=4)``"""
        merged = self.filters.model_dump()
        merged.update(changes)
        self.filters = LawyerFilter.model_validate(merged)
        self._reset_page()

    def search(self, query: str) -> None:
        self.update_filters(search_query=query)

    def set_quick_area(self, area: Optional[Union[PracticeArea, str]]) -> None:
        """Select a quick practice-area chip; None or "all" clears it"""
        if area is None or area == "all":
            self.quick_area = None
        else:
            self.quick_area = PracticeArea(area)
        self._reset_page()

    def clear_filters(self) -> None:
        self.filters = default_filters()
        self._reset_page()

    def set_sort(self, sort_by: Union[str, SortOption]) -> None:
        self.sort_by = SortOption.parse(sort_by)

    # Navigation

    def go_to_page(self, page: int) -> bool:
        """
        Move to ``page`` if it is navigable

        Returns:
            False and leaves the current page unchanged when out of range
        """
        if not is_valid_page(page, self.total_pages()):
            logger.debug(f"Ignoring navigation to page {page}")
            return False
        self.page = page
        return True

    def next_page(self) -> bool:
        return self.go_to_page(self.page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.page - 1)

    # Views

    def results(self) -> List[Lawyer]:
        """Every lawyer matching the current selection, in display order"""
        lawyers = apply_filters(self.store.list(), self.filters)
        if self.quick_area is not None:
            lawyers = [
                lawyer for lawyer in lawyers
                if matches_practice_areas(lawyer, [self.quick_area])
            ]
        return sort_lawyers(lawyers, self.sort_by)

    def total_pages(self) -> int:
        return count_pages(len(self.results()), self.page_size)

    def current_page(self) -> LawyerPage:
        return paginate(self.results(), self.page, self.page_size)

    def page_numbers(self) -> List[int]:
        return page_window(self.page, self.total_pages())

    def _reset_page(self) -> None:
        self.page = 1
