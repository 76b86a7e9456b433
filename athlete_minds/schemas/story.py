"""
Story schemas.
"""

from datetime import datetime

from pydantic import ConfigDict

from athlete_minds.schemas.common import CamelModel, InputModel


class StoryCreate(InputModel):
    """Story submission from the public form."""

    first_name: str
    last_name: str
    sport: str
    injury_type: str
    email: str
    title: str
    content: str


class StoryResponse(CamelModel):
    """Story response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    sport: str
    injury_type: str
    email: str
    title: str
    content: str
    approved: bool
    submitted_at: datetime
