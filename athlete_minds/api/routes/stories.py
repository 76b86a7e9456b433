"""
Story endpoints: public listing and submission, plus the moderation queue.
"""

from typing import List

from fastapi import APIRouter, status

from athlete_minds.api.deps import ClientIp, Moderation
from athlete_minds.schemas.common import SuccessResponse
from athlete_minds.schemas.story import StoryCreate, StoryResponse

router = APIRouter()


@router.get("", response_model=List[StoryResponse])
async def list_published_stories(moderation: Moderation):
    """List approved stories."""
    return [StoryResponse.model_validate(s) for s in moderation.published()]


@router.get("/pending", response_model=List[StoryResponse])
async def list_pending_stories(moderation: Moderation):
    """List stories awaiting a moderation decision."""
    return [StoryResponse.model_validate(s) for s in moderation.pending()]


@router.post("", response_model=StoryResponse, status_code=status.HTTP_201_CREATED)
async def submit_story(
    data: StoryCreate,
    moderation: Moderation,
    client_ip: ClientIp,
):
    """Submit a story for review. It is not public until approved."""
    story = moderation.submit(data, ip_address=client_ip)
    return StoryResponse.model_validate(story)


@router.post("/{story_id}/approve", response_model=StoryResponse)
async def approve_story(
    story_id: int,
    moderation: Moderation,
    client_ip: ClientIp,
):
    """Publish a story."""
    story = moderation.approve(story_id, ip_address=client_ip)
    return StoryResponse.model_validate(story)


@router.delete("/{story_id}", response_model=SuccessResponse)
async def reject_story(
    story_id: int,
    moderation: Moderation,
    client_ip: ClientIp,
):
    """Reject (delete) a story, pending or published."""
    moderation.reject(story_id, ip_address=client_ip)
    return SuccessResponse(message="Story deleted successfully")
