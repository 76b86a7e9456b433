"""
Resource library endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from athlete_minds.api.deps import ClientIp, Events, Store
from athlete_minds.kernel.errors import NotFoundError
from athlete_minds.kernel.models import EventType
from athlete_minds.schemas.resource import LikesUpdate, ResourceResponse

router = APIRouter()


@router.get("", response_model=List[ResourceResponse])
async def list_resources(
    store: Store,
    category: Optional[str] = Query(None, description="Only resources in this category"),
):
    """List resources in creation order, optionally filtered by category."""
    resources = store.get_resources_by_category(category) if category else store.get_resources()
    return [ResourceResponse.model_validate(r) for r in resources]


@router.post("/{resource_id}/like", response_model=ResourceResponse)
async def update_likes(
    resource_id: int,
    data: LikesUpdate,
    store: Store,
    events: Events,
    client_ip: ClientIp,
):
    """Replace a resource's like count with the submitted total."""
    previous = store.get_resource(resource_id)
    resource = store.update_resource_likes(resource_id, data.likes)
    if resource is None:
        raise NotFoundError("Resource not found")

    events.log(
        event_type=EventType.RESOURCE_LIKES_UPDATED,
        entity_type="resource",
        entity_id=resource.id,
        payload={
            "previous": previous.likes if previous else None,
            "likes": resource.likes,
        },
        ip_address=client_ip,
    )
    return ResourceResponse.model_validate(resource)
