"""
Pydantic schemas for API request/response validation.
"""

from athlete_minds.schemas.user import UserCreate
from athlete_minds.schemas.resource import (
    ResourceCreate,
    ResourceResponse,
    LikesUpdate,
)
from athlete_minds.schemas.story import (
    StoryCreate,
    StoryResponse,
)
from athlete_minds.schemas.contact import (
    ContactCreate,
    ContactResponse,
)
from athlete_minds.schemas.common import (
    CamelModel,
    InputModel,
    ErrorResponse,
    FieldErrorResponse,
    SuccessResponse,
    HealthResponse,
)

__all__ = [
    # User
    "UserCreate",
    # Resource
    "ResourceCreate",
    "ResourceResponse",
    "LikesUpdate",
    # Story
    "StoryCreate",
    "StoryResponse",
    # Contact
    "ContactCreate",
    "ContactResponse",
    # Common
    "CamelModel",
    "InputModel",
    "ErrorResponse",
    "FieldErrorResponse",
    "SuccessResponse",
    "HealthResponse",
]
