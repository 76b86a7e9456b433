"""
Contact form submission record.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Contact:
    """Message sent through the general inquiry form."""

    id: int
    name: str
    email: str
    inquiry_type: str  # free text; the form suggests partnership, resource, feedback, ...
    message: str
    submitted_at: datetime
