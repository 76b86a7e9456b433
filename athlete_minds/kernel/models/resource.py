"""
Curated support resource record.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Resource:
    """A mental-health support link or article shown in the resource library."""

    id: int
    title: str
    description: str
    category: str
    icon: str
    url: Optional[str] = None
    rating: int = 0
    likes: int = 0
