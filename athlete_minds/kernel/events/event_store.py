"""
Event Store service for append-only audit logging.

Every mutation performed through the workflow or API is recorded here after
the store accepted it. Entries are never edited or removed, so a rejected
story keeps its history even though the record itself is gone.
"""

import json
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from athlete_minds.kernel.models.event_log import EventLog, EventType


class EventStore:
    """
    In-memory immutable event log.

    Usage:
        event_store = EventStore()
        event_store.log(
            event_type=EventType.STORY_APPROVED,
            entity_type="story",
            entity_id=story.id,
            payload={"from_state": "pending", "to_state": "published"},
        )
    """

    def __init__(self) -> None:
        self._events: List[EventLog] = []
        self._lock = threading.Lock()

    def log(
        self,
        event_type: EventType,
        entity_type: str,
        entity_id: int,
        payload: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
    ) -> EventLog:
        """
        Append an event to the audit log.

        Args:
            event_type: The type of event
            entity_type: The type of entity (user, resource, story, contact)
            entity_id: The ID of the entity
            payload: Additional event data
            ip_address: Client IP address

        Returns:
            The created EventLog record
        """
        with self._lock:
            event = EventLog(
                id=len(self._events) + 1,
                event_type=event_type,
                entity_type=entity_type,
                entity_id=entity_id,
                created_at=datetime.now(timezone.utc),
                payload=self._serialize_payload(payload or {}),
                ip_address=ip_address,
            )
            self._events.append(event)
            return event

    def get_entity_history(
        self,
        entity_type: str,
        entity_id: int,
        event_types: Optional[List[EventType]] = None,
        limit: int = 100,
    ) -> List[EventLog]:
        """
        Get the event history for a specific entity, newest first.

        Args:
            entity_type: The type of entity
            entity_id: The ID of the entity
            event_types: Optional filter for specific event types
            limit: Maximum number of events to return
        """
        with self._lock:
            matches = [
                e for e in reversed(self._events)
                if e.entity_type == entity_type
                and e.entity_id == entity_id
                and (not event_types or e.event_type in event_types)
            ]
        return matches[:limit]

    def recent(self, limit: int = 50) -> List[EventLog]:
        """Most recent events across all entities, newest first."""
        with self._lock:
            return list(reversed(self._events[-limit:])) if limit > 0 else []

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    @staticmethod
    def _serialize_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
        """Round-trip through JSON so stored payloads never hold live objects."""
        return json.loads(json.dumps(payload, default=str))
