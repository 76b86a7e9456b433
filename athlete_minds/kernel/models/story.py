"""
Recovery story record.

A story is publicly visible only once ``approved`` is set; until then it
sits in the moderation queue.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Story:
    """First-person recovery narrative submitted by a visitor."""

    id: int
    first_name: str
    last_name: str
    sport: str
    injury_type: str
    email: str
    title: str
    content: str
    submitted_at: datetime
    approved: bool = False
