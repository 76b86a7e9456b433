"""
Domain records.

Frozen dataclasses: the store hands these out by value and replaces them
wholesale on update.
"""

from athlete_minds.kernel.models.user import User
from athlete_minds.kernel.models.resource import Resource
from athlete_minds.kernel.models.story import Story
from athlete_minds.kernel.models.contact import Contact
from athlete_minds.kernel.models.event_log import EventLog, EventType

__all__ = [
    "User",
    "Resource",
    "Story",
    "Contact",
    "EventLog",
    "EventType",
]
