from lawyermatch.models.lawyer import (
    PracticeArea,
    ExperienceLevel,
    Lawyer,
    LawyerBase,
    LawyerFilter,
    PRACTICE_AREA_LABELS,
    EXPERIENCE_LEVEL_LABELS,
)

__all__ = [
    "PracticeArea",
    "ExperienceLevel",
    "Lawyer",
    "LawyerBase",
    "LawyerFilter",
    "PRACTICE_AREA_LABELS",
    "EXPERIENCE_LEVEL_LABELS",
]
