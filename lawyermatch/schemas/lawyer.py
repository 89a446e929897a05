"""
Schemas for lawyer requests and responses
"""

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List

from lawyermatch.models.lawyer import (
    LawyerBase,
    Lawyer,
    LawyerFilter,
    PracticeArea,
    ExperienceLevel,
)


class LawyerCreate(LawyerBase):
    """Payload for adding a lawyer to the catalog; the store assigns the id"""


class LawyerUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    profile_image: Optional[str] = Field(None, alias="profileImage")
    bio: Optional[str] = None
    practice_areas: Optional[List[PracticeArea]] = Field(
        None, min_length=1, alias="practiceAreas")
    hourly_rate: Optional[int] = Field(None, gt=0, alias="hourlyRate")
    rating: Optional[float] = Field(None, ge=0, le=5)
    review_count: Optional[int] = Field(None, ge=0, alias="reviewCount")
    location: Optional[str] = None
    experience_level: Optional[ExperienceLevel] = Field(
        None, alias="experienceLevel")
    available_for_consultation: Optional[bool] = Field(
        None, alias="availableForConsultation")
    featured: Optional[bool] = None
    contact_email: Optional[str] = Field(None, alias="contactEmail")
    contact_phone: Optional[str] = Field(None, alias="contactPhone")
    address: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class BrowseRequest(BaseModel):
    """Filter, sort and page selection for a single listing request"""

    filters: LawyerFilter = Field(default_factory=LawyerFilter)
    sort_by: str = Field(default="relevance", alias="sortBy")
    page: int = Field(default=1, ge=1)
    page_size: Optional[int] = Field(default=None, ge=1, alias="pageSize")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "filters": {
                    "practiceAreas": ["family_law"],
                    "minRating": 4,
                    "maxPrice": 300,
                },
                "sortBy": "rating-high",
                "page": 1,
                "pageSize": 9,
            }
        }
    )


class LawyerListResponse(BaseModel):
    lawyers: List[Lawyer]
    total: int
    page: int
    page_size: int = Field(..., alias="pageSize")
    total_pages: int = Field(..., alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)


class OptionResponse(BaseModel):
    """Enumeration member with its display label"""

    value: str
    label: str


class MessageResponse(BaseModel):
    message: str
