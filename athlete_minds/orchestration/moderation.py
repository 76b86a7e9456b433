"""
State machine for the story moderation lifecycle.

    submit -> pending ---approve---> published --approve--+
                 |                    |    ^              |
                 |                    |    +--------------+
                 +------reject------> deleted <--reject---+

Published is re-enterable (approving twice is a no-op that still succeeds).
Rejection is allowed from either live state and removes the record, so
nothing ever leaves ``deleted``.
"""

from enum import Enum
from typing import List, Optional, Set, Tuple

from athlete_minds.kernel.errors import NotFoundError
from athlete_minds.kernel.events.event_store import EventStore
from athlete_minds.kernel.models import EventType, Story
from athlete_minds.kernel.store import RecordStore
from athlete_minds.logging_config import get_logger
from athlete_minds.schemas.story import StoryCreate

logger = get_logger(__name__)


class StoryState(str, Enum):
    """Moderation state derived from a story record."""

    PENDING = "pending"
    PUBLISHED = "published"
    DELETED = "deleted"


_TRANSITIONS: Set[Tuple[StoryState, StoryState]] = {
    (StoryState.PENDING, StoryState.PUBLISHED),
    (StoryState.PUBLISHED, StoryState.PUBLISHED),
    (StoryState.PENDING, StoryState.DELETED),
    (StoryState.PUBLISHED, StoryState.DELETED),
}


def state_of(story: Optional[Story]) -> StoryState:
    """Current state of a story; a missing record counts as deleted."""
    if story is None:
        return StoryState.DELETED
    return StoryState.PUBLISHED if story.approved else StoryState.PENDING


def valid_transitions(from_state: StoryState) -> List[StoryState]:
    """Return the states reachable from ``from_state``."""
    return sorted({t for f, t in _TRANSITIONS if f == from_state}, key=lambda s: s.value)


def can_transition(from_state: StoryState, to_state: StoryState) -> bool:
    return (from_state, to_state) in _TRANSITIONS


class ModerationWorkflow:
    """Submits, approves and rejects stories, recording each step in the audit log."""

    def __init__(self, store: RecordStore, event_store: EventStore):
        self.store = store
        self.event_store = event_store

    def submit(self, data: StoryCreate, ip_address: Optional[str] = None) -> Story:
        """Store a new submission. It always starts pending."""
        story = self.store.create_story(data)
        self.event_store.log(
            event_type=EventType.STORY_SUBMITTED,
            entity_type="story",
            entity_id=story.id,
            payload={"title": story.title, "sport": story.sport},
            ip_address=ip_address,
        )
        logger.info("Story submitted", extra={"story_id": story.id})
        return story

    def approve(self, story_id: int, ip_address: Optional[str] = None) -> Story:
        """
        Publish a story.

        Raises:
            NotFoundError: If no story has this id
        """
        from_state = state_of(self.store.get_story(story_id))
        self._check(from_state, StoryState.PUBLISHED)

        story = self.store.approve_story(story_id)
        if story is None:
            # removed between the lookup and the write
            raise NotFoundError("Story not found")

        self._record(EventType.STORY_APPROVED, story_id, from_state, StoryState.PUBLISHED, ip_address)
        return story

    def reject(self, story_id: int, ip_address: Optional[str] = None) -> None:
        """
        Remove a story, whether pending or already published.

        Raises:
            NotFoundError: If no story has this id
        """
        from_state = state_of(self.store.get_story(story_id))
        self._check(from_state, StoryState.DELETED)

        if not self.store.reject_story(story_id):
            raise NotFoundError("Story not found")

        self._record(EventType.STORY_REJECTED, story_id, from_state, StoryState.DELETED, ip_address)

    def pending(self) -> List[Story]:
        return self.store.get_pending_stories()

    def published(self) -> List[Story]:
        return self.store.get_approved_stories()

    @staticmethod
    def _check(from_state: StoryState, to_state: StoryState) -> None:
        # Both live states reach every moderation target; only a missing story fails
        if not can_transition(from_state, to_state):
            raise NotFoundError("Story not found")

    def _record(
        self,
        event_type: EventType,
        story_id: int,
        from_state: StoryState,
        to_state: StoryState,
        ip_address: Optional[str],
    ) -> None:
        self.event_store.log(
            event_type=event_type,
            entity_type="story",
            entity_id=story_id,
            payload={"from_state": from_state.value, "to_state": to_state.value},
            ip_address=ip_address,
        )
        logger.info(
            "Story %s -> %s",
            from_state.value,
            to_state.value,
            extra={"story_id": story_id},
        )
