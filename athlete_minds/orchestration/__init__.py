"""Orchestration layer - story moderation state machine."""

from athlete_minds.orchestration.moderation import (
    ModerationWorkflow,
    StoryState,
    can_transition,
    state_of,
    valid_transitions,
)

__all__ = [
    "ModerationWorkflow",
    "StoryState",
    "can_transition",
    "state_of",
    "valid_transitions",
]
