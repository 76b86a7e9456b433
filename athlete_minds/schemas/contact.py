"""
Contact schemas.
"""

from datetime import datetime

from pydantic import ConfigDict

from athlete_minds.schemas.common import CamelModel, InputModel


class ContactCreate(InputModel):
    """Contact form submission."""

    name: str
    email: str
    inquiry_type: str
    message: str


class ContactResponse(CamelModel):
    """Contact response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    inquiry_type: str
    message: str
    submitted_at: datetime
