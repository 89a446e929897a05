"""
Pydantic schemas for request/response validation
"""

from lawyermatch.schemas.lawyer import (
    LawyerCreate,
    LawyerUpdate,
    BrowseRequest,
    LawyerListResponse,
    OptionResponse,
    MessageResponse,
)

__all__ = [
    "LawyerCreate",
    "LawyerUpdate",
    "BrowseRequest",
    "LawyerListResponse",
    "OptionResponse",
    "MessageResponse",
]
