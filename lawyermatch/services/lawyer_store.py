"""
In-memory lawyer store

LawyerStore keeps the catalog for the lifetime of the process. The
FastAPI application owns one instance (see lawyermatch.dependencies);
tests and the listing layer construct their own.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from lawyermatch.models.lawyer import (
    Lawyer,
    LawyerFilter,
    PracticeArea,
    ExperienceLevel,
)
from lawyermatch.schemas.lawyer import LawyerCreate, LawyerUpdate
from lawyermatch.services import filters

logger = logging.getLogger(__name__)


class LawyerStore:
    """Lawyer records keyed by sequential integer id, in insertion order"""

    def __init__(self):
        self._lawyers: Dict[int, Lawyer] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._lawyers)

    def create(self, data: Union[LawyerCreate, Mapping[str, Any]]) -> Lawyer:
        """
        Add a lawyer and assign the next id

        Raises:
            pydantic.ValidationError: If ``data`` is not a valid profile
        """
        if not isinstance(data, LawyerCreate):
            data = LawyerCreate.model_validate(data)

        lawyer = Lawyer(id=self._next_id, **data.model_dump())
        self._lawyers[lawyer.id] = lawyer
        self._next_id += 1
        logger.debug(f"Created lawyer {lawyer.id} ({lawyer.name})")
        return lawyer

    def get(self, lawyer_id: int) -> Optional[Lawyer]:
        return self._lawyers.get(lawyer_id)

    def update(
        self, lawyer_id: int, changes: Union[LawyerUpdate, Mapping[str, Any]]
    ) -> Optional[Lawyer]:
        """
        Merge the provided fields over an existing lawyer

        Fields that are missing or null in ``changes`` keep their current
        value. The merged record is validated before it replaces the old
        one, so a rejected update leaves the store untouched.

        Returns:
            The updated lawyer, or None if ``lawyer_id`` is unknown

        Raises:
            pydantic.ValidationError: If the merged record is invalid
        """
        existing = self._lawyers.get(lawyer_id)
        if existing is None:
            return None

        if not isinstance(changes, LawyerUpdate):
            changes = LawyerUpdate.model_validate(changes)
        update_fields = changes.model_dump(exclude_unset=True, exclude_none=True)

        merged = existing.model_dump()
        merged.update(update_fields)
        merged["id"] = lawyer_id
        updated = Lawyer.model_validate(merged)

        self._lawyers[lawyer_id] = updated
        logger.debug(f"Updated lawyer {lawyer_id}: {sorted(update_fields)}")
        return updated

    def delete(self, lawyer_id: int) -> bool:
        removed = self._lawyers.pop(lawyer_id, None)
        if removed is not None:
            logger.debug(f"Deleted lawyer {lawyer_id}")
        return removed is not None

    def list(self) -> List[Lawyer]:
        return list(self._lawyers.values())

    def find(self, predicate: Callable[[Lawyer], bool]) -> List[Lawyer]:
        return [lawyer for lawyer in self._lawyers.values() if predicate(lawyer)]

    # Single-dimension queries

    def by_practice_area(self, area: PracticeArea) -> List[Lawyer]:
        return self.find(lambda lawyer: filters.matches_practice_areas(lawyer, [area]))

    def by_min_rating(self, min_rating: float) -> List[Lawyer]:
        return self.find(lambda lawyer: filters.meets_min_rating(lawyer, min_rating))

    def by_price_range(self, min_price: float, max_price: float) -> List[Lawyer]:
        return self.find(
            lambda lawyer: filters.within_price_range(lawyer, min_price, max_price))

    def by_experience_level(self, level: ExperienceLevel) -> List[Lawyer]:
        return self.find(
            lambda lawyer: filters.matches_experience_levels(lawyer, [level]))

    def available(self) -> List[Lawyer]:
        return self.find(lambda lawyer: filters.matches_availability(lawyer, True))

    def featured(self) -> List[Lawyer]:
        return self.find(lambda lawyer: lawyer.featured)

    def search(self, query: str) -> List[Lawyer]:
        return self.find(lambda lawyer: filters.matches_search_query(lawyer, query))

    def filter(self, criteria: Optional[LawyerFilter] = None) -> List[Lawyer]:
        return filters.apply_filters(self._lawyers.values(), criteria)

    def seed(self, records: Iterable[Union[LawyerCreate, Mapping[str, Any]]]) -> int:
        """
        Populate an empty store

        Every record is validated before any is inserted, so an invalid
        record leaves the store empty and a later seed can still run.

        Returns:
            Number of lawyers created; 0 when the store already had data

        Raises:
            pydantic.ValidationError: If any record is not a valid profile
        """
        if self._lawyers:
            logger.info(
                f"Skipping lawyer seed, store already holds {len(self._lawyers)} records")
            return 0

        validated = [
            record if isinstance(record, LawyerCreate) else LawyerCreate.model_validate(record)
            for record in records
        ]
        for record in validated:
            self.create(record)
        logger.info(f"Seeded {len(validated)} lawyers")
        return len(validated)
