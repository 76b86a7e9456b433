"""
Immutable Event Log - append-only audit trail.
"""

from athlete_minds.kernel.events.event_store import EventStore
from athlete_minds.kernel.models.event_log import EventLog, EventType

__all__ = [
    "EventStore",
    "EventLog",
    "EventType",
]
