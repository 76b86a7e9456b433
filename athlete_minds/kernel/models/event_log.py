"""
Immutable audit event record.

Mutations of resources, stories, contacts and users are appended to the
event log by the services that perform them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class EventType(str, Enum):
    """All event types for the audit log."""

    # User events
    USER_REGISTERED = "user.registered"

    # Resource events
    RESOURCE_LIKES_UPDATED = "resource.likes_updated"

    # Story moderation events
    STORY_SUBMITTED = "story.submitted"
    STORY_APPROVED = "story.approved"
    STORY_REJECTED = "story.rejected"

    # Contact events
    CONTACT_SUBMITTED = "contact.submitted"


@dataclass(frozen=True)
class EventLog:
    """One entry in the append-only audit trail."""

    id: int
    event_type: EventType
    entity_type: str
    entity_id: int
    created_at: datetime
    payload: Dict[str, Any] = field(default_factory=dict)
    ip_address: Optional[str] = None

    def __repr__(self) -> str:
        return f"<EventLog {self.event_type.value} {self.entity_type}:{self.entity_id}>"
