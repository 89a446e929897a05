"""
Lawyer catalog endpoints

Endpoints:
- GET /api/lawyers - list every lawyer
- GET /api/lawyers/{id} - get lawyer profile
- GET /api/lawyers/practice/{area} - lawyers practicing in an area
- GET /api/lawyers/rating/{minRating} - lawyers rated at least minRating
- GET /api/lawyers/price?min=&max= - lawyers within an hourly rate range
- GET /api/lawyers/experience/{level} - lawyers at an experience level
- GET /api/lawyers/available - lawyers open for consultation
- GET /api/lawyers/featured - featured lawyers
- GET /api/lawyers/search?q= - free-text search
- POST /api/lawyers/filter - combined filter criteria
- POST /api/lawyers/browse - filter, sort and paginate in one call
- POST/PUT/DELETE /api/lawyers[/{id}] - manage catalog entries
"""

import logging
import math
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from lawyermatch.config import settings
from lawyermatch.dependencies import get_lawyer_store
from lawyermatch.models.lawyer import (
    Lawyer,
    LawyerFilter,
    PracticeArea,
    ExperienceLevel,
)
from lawyermatch.schemas.lawyer import (
    LawyerCreate,
    LawyerUpdate,
    BrowseRequest,
    LawyerListResponse,
    OptionResponse,
)
from lawyermatch.services.filters import apply_filters
from lawyermatch.services.lawyer_store import LawyerStore
from lawyermatch.services.pagination import paginate
from lawyermatch.services.sorting import SORT_LABELS, sort_lawyers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/lawyers", tags=["lawyers"])


def _parse_lawyer_id(raw: str) -> int:
    """Accept only plain positive integers as lawyer ids"""
    if not (raw.isascii() and raw.isdigit()) or int(raw) < 1:
        raise HTTPException(status_code=400, detail="Invalid lawyer ID")
    return int(raw)


def _parse_price(raw: Optional[str], default: float) -> float:
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid price range")
    if not math.isfinite(value):
        raise HTTPException(status_code=400, detail="Invalid price range")
    return value


# Static paths are registered before /{lawyer_id} so they are not
# captured as ids.

@router.get("", response_model=List[Lawyer])
async def list_lawyers(store: LawyerStore = Depends(get_lawyer_store)):
    try:
        return store.list()
    except Exception:
        logger.exception("Failed to retrieve lawyers")
        raise HTTPException(status_code=500, detail="Failed to retrieve lawyers")


@router.get("/practice-areas", response_model=List[OptionResponse])
async def list_practice_areas():
    """Practice areas with their display labels"""
    return [OptionResponse(value=area.value, label=area.label) for area in PracticeArea]


@router.get("/experience-levels", response_model=List[OptionResponse])
async def list_experience_levels():
    return [
        OptionResponse(value=level.value, label=level.label) for level in ExperienceLevel
    ]


@router.get("/sort-options", response_model=List[OptionResponse])
async def list_sort_options():
    return [
        OptionResponse(value=option.value, label=label)
        for option, label in SORT_LABELS.items()
    ]


@router.get("/available", response_model=List[Lawyer])
async def get_available_lawyers(store: LawyerStore = Depends(get_lawyer_store)):
    try:
        return store.available()
    except Exception:
        logger.exception("Failed to retrieve available lawyers")
        raise HTTPException(
            status_code=500, detail="Failed to retrieve available lawyers")


@router.get("/featured", response_model=List[Lawyer])
async def get_featured_lawyers(store: LawyerStore = Depends(get_lawyer_store)):
    try:
        return store.featured()
    except Exception:
        logger.exception("Failed to retrieve featured lawyers")
        raise HTTPException(
            status_code=500, detail="Failed to retrieve featured lawyers")


@router.get("/search", response_model=List[Lawyer])
async def search_lawyers(
    q: Optional[str] = Query(None),
    store: LawyerStore = Depends(get_lawyer_store),
):
    """
    Search lawyers by name, location, bio or practice area tag
    """
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")

    try:
        return store.search(q)
    except Exception:
        logger.exception(f"Search failed for query {q!r}")
        raise HTTPException(status_code=500, detail="Failed to search lawyers")


@router.get("/price", response_model=List[Lawyer])
async def get_lawyers_by_price(
    min_price: Optional[str] = Query(None, alias="min"),
    max_price: Optional[str] = Query(None, alias="max"),
    store: LawyerStore = Depends(get_lawyer_store),
):
    low = _parse_price(min_price, 0)
    high = _parse_price(max_price, settings.DEFAULT_MAX_PRICE)
    if low < 0 or high <= 0 or low > high:
        raise HTTPException(status_code=400, detail="Invalid price range")

    try:
        return store.by_price_range(low, high)
    except Exception:
        logger.exception(f"Price filter failed for range {low}-{high}")
        raise HTTPException(
            status_code=500, detail="Failed to filter lawyers by price range")


@router.get("/practice/{practice_area}", response_model=List[Lawyer])
async def get_lawyers_by_practice_area(
    practice_area: str, store: LawyerStore = Depends(get_lawyer_store)
):
    try:
        area = PracticeArea(practice_area)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid practice area")

    try:
        return store.by_practice_area(area)
    except Exception:
        logger.exception(f"Practice area filter failed for {area.value}")
        raise HTTPException(
            status_code=500, detail="Failed to filter lawyers by practice area")


@router.get("/rating/{min_rating}", response_model=List[Lawyer])
async def get_lawyers_by_rating(
    min_rating: str, store: LawyerStore = Depends(get_lawyer_store)
):
    try:
        value = float(min_rating)
    except ValueError:
        value = math.nan
    # NaN fails both comparisons, so check it explicitly
    if math.isnan(value) or value < 1 or value > 5:
        raise HTTPException(
            status_code=400, detail="Invalid rating. Must be between 1 and 5")

    try:
        return store.by_min_rating(value)
    except Exception:
        logger.exception(f"Rating filter failed for minimum {value}")
        raise HTTPException(
            status_code=500, detail="Failed to filter lawyers by rating")


@router.get("/experience/{level}", response_model=List[Lawyer])
async def get_lawyers_by_experience(
    level: str, store: LawyerStore = Depends(get_lawyer_store)
):
    try:
        experience_level = ExperienceLevel(level)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid experience level")

    try:
        return store.by_experience_level(experience_level)
    except Exception:
        logger.exception(f"Experience filter failed for {experience_level.value}")
        raise HTTPException(
            status_code=500, detail="Failed to filter lawyers by experience level")


@router.post("/filter", response_model=List[Lawyer])
async def filter_lawyers(
    criteria: Optional[LawyerFilter] = None,
    store: LawyerStore = Depends(get_lawyer_store),
):
    """
    Apply several filter dimensions at once

    Lawyers must satisfy every provided criterion; within practiceAreas
    and experienceLevels any listed value matches.
    """
    try:
        return store.filter(criteria)
    except Exception:
        logger.exception("Combined filter failed")
        raise HTTPException(status_code=500, detail="Failed to filter lawyers")


@router.post("/browse", response_model=LawyerListResponse)
async def browse_lawyers(
    browse: BrowseRequest, store: LawyerStore = Depends(get_lawyer_store)
):
    """
    Filter, sort and paginate the catalog

    Unknown sort keys fall back to relevance order. Pages past the last
    one come back empty.
    """
    page_size = browse.page_size or settings.PAGE_SIZE
    if page_size > settings.MAX_PAGE_SIZE:
        raise HTTPException(
            status_code=400,
            detail=f"pageSize must not exceed {settings.MAX_PAGE_SIZE}",
        )

    try:
        lawyers = apply_filters(store.list(), browse.filters)
        ordered = sort_lawyers(lawyers, browse.sort_by)
        result = paginate(ordered, browse.page, page_size)
    except Exception:
        logger.exception("Browse request failed")
        raise HTTPException(status_code=500, detail="Failed to browse lawyers")

    return LawyerListResponse(
        lawyers=result.items,
        total=result.total_items,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.post("", response_model=Lawyer, status_code=201)
async def create_lawyer(
    data: LawyerCreate, store: LawyerStore = Depends(get_lawyer_store)
):
    try:
        lawyer = store.create(data)
    except Exception:
        logger.exception("Failed to create lawyer")
        raise HTTPException(status_code=500, detail="Failed to create lawyer")

    logger.info(f"Created lawyer {lawyer.id}")
    return lawyer


@router.get("/{lawyer_id}", response_model=Lawyer)
async def get_lawyer(lawyer_id: str, store: LawyerStore = Depends(get_lawyer_store)):
    lawyer_pk = _parse_lawyer_id(lawyer_id)

    try:
        lawyer = store.get(lawyer_pk)
    except Exception:
        logger.exception(f"Failed to retrieve lawyer {lawyer_pk}")
        raise HTTPException(status_code=500, detail="Failed to retrieve lawyer")

    if lawyer is None:
        raise HTTPException(status_code=404, detail="Lawyer not found")
    return lawyer


@router.put("/{lawyer_id}", response_model=Lawyer)
async def update_lawyer(
    lawyer_id: str,
    data: LawyerUpdate,
    store: LawyerStore = Depends(get_lawyer_store),
):
    lawyer_pk = _parse_lawyer_id(lawyer_id)

    try:
        lawyer = store.update(lawyer_pk, data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid lawyer update: {e.error_count()} error(s)")
    except Exception:
        logger.exception(f"Failed to update lawyer {lawyer_pk}")
        raise HTTPException(status_code=500, detail="Failed to update lawyer")

    if lawyer is None:
        raise HTTPException(status_code=404, detail="Lawyer not found")
    logger.info(f"Updated lawyer {lawyer_pk}")
    return lawyer


@router.delete("/{lawyer_id}")
async def delete_lawyer(lawyer_id: str, store: LawyerStore = Depends(get_lawyer_store)):
    lawyer_pk = _parse_lawyer_id(lawyer_id)

    try:
        deleted = store.delete(lawyer_pk)
    except Exception:
        logger.exception(f"Failed to delete lawyer {lawyer_pk}")
        raise HTTPException(status_code=500, detail="Failed to delete lawyer")

    if not deleted:
        raise HTTPException(status_code=404, detail="Lawyer not found")
    logger.info(f"Deleted lawyer {lawyer_pk}")
    return {"ok": True}
