"""
Kernel Layer

Records, storage, validation and audit for the four entity kinds:
- Record Store (keyed collections, monotonic ids, never reused)
- Validation (declarative payload shapes, structured field errors)
- Immutable Event Log (every accepted mutation is recorded)
- Identity Core (user accounts, bcrypt hashes)
"""

from athlete_minds.kernel.models import (
    User,
    Resource,
    Story,
    Contact,
    EventLog,
    EventType,
)
from athlete_minds.kernel.store import RecordStore

__all__ = [
    "User",
    "Resource",
    "Story",
    "Contact",
    "EventLog",
    "EventType",
    "RecordStore",
]
