"""
Resource schemas.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from athlete_minds.schemas.common import CamelModel, InputModel


class ResourceCreate(InputModel):
    """Resource creation payload (used for seeding the library)."""

    title: str
    description: str
    category: str
    icon: str
    url: Optional[str] = None
    rating: int = Field(0, ge=0, le=5)
    likes: int = 0


class LikesUpdate(InputModel):
    """Like counter replacement. The client sends the new total, not a delta."""

    likes: int


class ResourceResponse(CamelModel):
    """Resource response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    category: str
    icon: str
    url: Optional[str]
    rating: int
    likes: int
