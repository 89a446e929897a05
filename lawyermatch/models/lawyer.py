"""
Lawyer Models for LawyerMatch

This module defines the closed enumerations used across the catalog
(practice areas and experience levels), the Lawyer record held by the
store, and the LawyerFilter configuration consumed by the filter module.
"""

from enum import Enum
from typing import List, Optional, Tuple
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator


class PracticeArea(str, Enum):
    """Legal specialty tag enumeration"""

    FAMILY_LAW = "family_law"
    CRIMINAL_DEFENSE = "criminal_defense"
    IMMIGRATION_LAW = "immigration_law"
    PERSONAL_INJURY = "personal_injury"
    ESTATE_PLANNING = "estate_planning"
    TAX_LAW = "tax_law"
    EMPLOYMENT_LAW = "employment_law"
    BUSINESS_LAW = "business_law"
    INTELLECTUAL_PROPERTY = "intellectual_property"
    REAL_ESTATE_LAW = "real_estate_law"

    @property
    def label(self) -> str:
        return PRACTICE_AREA_LABELS[self]


class ExperienceLevel(str, Enum):
    """Coarse seniority bucket"""

    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"

    @property
    def label(self) -> str:
        return EXPERIENCE_LEVEL_LABELS[self]


PRACTICE_AREA_LABELS = {
    PracticeArea.FAMILY_LAW: "Family Law",
    PracticeArea.CRIMINAL_DEFENSE: "Criminal Defense",
    PracticeArea.IMMIGRATION_LAW: "Immigration Law",
    PracticeArea.PERSONAL_INJURY: "Personal Injury",
    PracticeArea.ESTATE_PLANNING: "Estate Planning",
    PracticeArea.TAX_LAW: "Tax Law",
    PracticeArea.EMPLOYMENT_LAW: "Employment Law",
    PracticeArea.BUSINESS_LAW: "Business Law",
    PracticeArea.INTELLECTUAL_PROPERTY: "Intellectual Property",
    PracticeArea.REAL_ESTATE_LAW: "Real Estate Law",
}

EXPERIENCE_LEVEL_LABELS = {
    ExperienceLevel.JUNIOR: "Junior (1-3 years)",
    ExperienceLevel.MID: "Mid-level (4-9 years)",
    ExperienceLevel.SENIOR: "Senior (10+ years)",
}


class LawyerBase(BaseModel):
    """Profile fields shared by stored lawyers and creation payloads"""

    name: str = Field(..., min_length=1, description="Full name")
    profile_image: str = Field(..., description="Profile picture URL", alias="profileImage")
    bio: str = Field(..., description="Short biography")
    practice_areas: Tuple[PracticeArea, ...] = Field(
        ..., min_length=1, description="Legal specialties", alias="practiceAreas"
    )
    hourly_rate: int = Field(..., gt=0, description="Rate per hour", alias="hourlyRate")
    rating: float = Field(..., ge=0, le=5, description="Average review rating")
    review_count: int = Field(default=0, ge=0, alias="reviewCount")
    location: str = Field(..., description="City and state")
    experience_level: ExperienceLevel = Field(..., alias="experienceLevel")
    available_for_consultation: bool = Field(
        default=True, alias="availableForConsultation"
    )
    featured: bool = Field(default=False)
    contact_email: str = Field(..., alias="contactEmail")
    contact_phone: str = Field(..., alias="contactPhone")
    address: str = Field(...)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("practice_areas")
    @classmethod
    def _dedupe_practice_areas(
        cls, value: Tuple[PracticeArea, ...]
    ) -> Tuple[PracticeArea, ...]:
        # set semantics, first-seen order kept for output
        return tuple(dict.fromkeys(value))


class Lawyer(LawyerBase):
    """
    Lawyer profile as held by the store

    Records are frozen; changes go through LawyerStore.update which
    builds and validates a replacement record.
    """

    id: int = Field(..., gt=0, description="Store-assigned identifier")

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Sarah Johnson",
                "profileImage": "https://randomuser.me/api/portraits/women/44.jpg",
                "bio": "Family law attorney focused on custody and divorce mediation.",
                "practiceAreas": ["family_law", "estate_planning"],
                "hourlyRate": 250,
                "rating": 4.8,
                "reviewCount": 124,
                "location": "Chicago, IL",
                "experienceLevel": "senior",
                "availableForConsultation": True,
                "featured": True,
                "contactEmail": "sarah.johnson@example.com",
                "contactPhone": "(312) 555-0142",
                "address": "200 W Madison St, Chicago, IL 60606",
            }
        }
    )


class LawyerFilter(BaseModel):
    """
    Filter configuration for a single catalog query

    Every field is optional; an absent field places no constraint on
    that dimension.
    """

    practice_areas: Optional[List[PracticeArea]] = Field(
        default=None, alias="practiceAreas")
    min_rating: Optional[float] = Field(
        default=None, ge=1, le=5, alias="minRating")
    min_price: Optional[float] = Field(default=None, ge=0, alias="minPrice")
    max_price: Optional[float] = Field(default=None, ge=0, alias="maxPrice")
    experience_levels: Optional[List[ExperienceLevel]] = Field(
        default=None, alias="experienceLevels")
    only_available: Optional[bool] = Field(default=None, alias="onlyAvailable")
    search_query: Optional[str] = Field(default=None, alias="searchQuery")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _check_price_bounds(self) -> "LawyerFilter":
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise ValueError("minPrice must not exceed maxPrice")
        return self
