"""
FastAPI dependencies resolving the stores and services attached to the app.

``create_app`` puts one RecordStore and one EventStore on ``app.state``;
handlers receive them through these dependencies rather than importing a
global.
"""

from typing import Annotated, Optional

from fastapi import Depends, Request

from athlete_minds.kernel.events.event_store import EventStore
from athlete_minds.kernel.store import RecordStore
from athlete_minds.orchestration.moderation import ModerationWorkflow


def get_store(request: Request) -> RecordStore:
    """The application's record store."""
    return request.app.state.store


def get_event_store(request: Request) -> EventStore:
    """The application's audit log."""
    return request.app.state.event_store


Store = Annotated[RecordStore, Depends(get_store)]
Events = Annotated[EventStore, Depends(get_event_store)]


def get_moderation(store: Store, events: Events) -> ModerationWorkflow:
    return ModerationWorkflow(store, events)


Moderation = Annotated[ModerationWorkflow, Depends(get_moderation)]


def get_client_ip(request: Request) -> Optional[str]:
    """Extract client IP from request."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


ClientIp = Annotated[Optional[str], Depends(get_client_ip)]
