"""
Ordering of filtered lawyer results
"""

from enum import Enum
from typing import Iterable, List, Optional, Union

from lawyermatch.models.lawyer import Lawyer


class SortOption(str, Enum):
    """Named sort keys offered by the listing"""

    RELEVANCE = "relevance"
    RATING_HIGH = "rating-high"
    RATING_LOW = "rating-low"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"

    @classmethod
    def parse(cls, value: Optional[Union[str, "SortOption"]]) -> "SortOption":
        """Unknown or missing keys fall back to relevance"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.RELEVANCE


SORT_LABELS = {
    SortOption.RELEVANCE: "Relevance",
    SortOption.RATING_HIGH: "Highest Rating",
    SortOption.RATING_LOW: "Lowest Rating",
    SortOption.PRICE_LOW: "Price: Low to High",
    SortOption.PRICE_HIGH: "Price: High to Low",
}


def sort_lawyers(
    lawyers: Iterable[Lawyer], sort_by: Optional[Union[str, SortOption]] = None
) -> List[Lawyer]:
    """
    Return a new list ordered by ``sort_by``

    sorted() is stable with reverse=True as well, so records with equal
    keys keep their input order in every mode.
    """
    option = SortOption.parse(sort_by)
    lawyers = list(lawyers)

    if option is SortOption.RATING_HIGH:
        return sorted(lawyers, key=lambda lawyer: lawyer.rating, reverse=True)
    if option is SortOption.RATING_LOW:
        return sorted(lawyers, key=lambda lawyer: lawyer.rating)
    if option is SortOption.PRICE_LOW:
        return sorted(lawyers, key=lambda lawyer: lawyer.hourly_rate)
    if option is SortOption.PRICE_HIGH:
        return sorted(lawyers, key=lambda lawyer: lawyer.hourly_rate, reverse=True)
    return lawyers
