"""
Lawyer catalog filtering

Each predicate tests one record against one filter dimension and is free
of side effects. apply_filters combines the active predicates of a
LawyerFilter conjunctively. Both the HTTP routes and the interactive
listing go through this module so the two never drift apart.
"""

import math
from typing import Callable, Iterable, List, Optional

from lawyermatch.models.lawyer import (
    Lawyer,
    LawyerFilter,
    PracticeArea,
    ExperienceLevel,
)

LawyerPredicate = Callable[[Lawyer], bool]


def matches_practice_areas(
    lawyer: Lawyer, areas: Optional[Iterable[PracticeArea]]
) -> bool:
    """True if the lawyer practices in at least one of ``areas``"""
    wanted = set(areas or ())
    if not wanted:
        return True
    return any(area in wanted for area in lawyer.practice_areas)


def meets_min_rating(lawyer: Lawyer, min_rating: Optional[float]) -> bool:
    if min_rating is None:
        return True
    return lawyer.rating >= min_rating


def within_price_range(
    lawyer: Lawyer,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
) -> bool:
    """Inclusive on both ends; unset bounds default to 0 and infinity"""
    low = min_price if min_price is not None else 0
    high = max_price if max_price is not None else math.inf
    return low <= lawyer.hourly_rate <= high


def matches_experience_levels(
    lawyer: Lawyer, levels: Optional[Iterable[ExperienceLevel]]
) -> bool:
    wanted = set(levels or ())
    if not wanted:
        return True
    return lawyer.experience_level in wanted


def matches_availability(lawyer: Lawyer, only_available: Optional[bool]) -> bool:
    if not only_available:
        return True
    return lawyer.available_for_consultation


def matches_search_query(lawyer: Lawyer, query: Optional[str]) -> bool:
    """
    Case-insensitive substring match on name, location, bio and tags

    Practice areas are compared by their raw enum value ("family_law"),
    not by display label.
    """
    if not query:
        return True
    needle = query.lower()
    if (
        needle in lawyer.name.lower()
        or needle in lawyer.location.lower()
        or needle in lawyer.bio.lower()
    ):
        return True
    return any(needle in area.value.lower() for area in lawyer.practice_areas)


def build_predicates(criteria: LawyerFilter) -> List[LawyerPredicate]:
    """Return predicates for every dimension ``criteria`` constrains"""
    predicates: List[LawyerPredicate] = []

    if criteria.practice_areas:
        predicates.append(
            lambda lawyer: matches_practice_areas(lawyer, criteria.practice_areas))
    if criteria.min_rating is not None:
        predicates.append(
            lambda lawyer: meets_min_rating(lawyer, criteria.min_rating))
    if criteria.min_price is not None or criteria.max_price is not None:
        predicates.append(
            lambda lawyer: within_price_range(
                lawyer, criteria.min_price, criteria.max_price))
    if criteria.experience_levels:
        predicates.append(
            lambda lawyer: matches_experience_levels(
                lawyer, criteria.experience_levels))
    if criteria.only_available:
        predicates.append(
            lambda lawyer: matches_availability(lawyer, criteria.only_available))
    if criteria.search_query:
        predicates.append(
            lambda lawyer: matches_search_query(lawyer, criteria.search_query))

    return predicates


def apply_filters(
    lawyers: Iterable[Lawyer], criteria: Optional[LawyerFilter] = None
) -> List[Lawyer]:
    """
    Keep the lawyers that pass every active filter dimension

    Args:
        lawyers: Records to filter, in the order they should be returned
        criteria: Filter configuration; None behaves like an empty filter

    Returns:
        The surviving records, original relative order preserved
    """
    if criteria is None:
        return list(lawyers)

    predicates = build_predicates(criteria)
    # all() stops at the first failing predicate
    return [
        lawyer for lawyer in lawyers
        if all(predicate(lawyer) for predicate in predicates)
    ]
