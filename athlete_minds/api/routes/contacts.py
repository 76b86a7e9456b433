"""
Contact form endpoints.
"""

from typing import List

from fastapi import APIRouter, status

from athlete_minds.api.deps import ClientIp, Events, Store
from athlete_minds.kernel.models import EventType
from athlete_minds.logging_config import get_logger
from athlete_minds.schemas.contact import ContactCreate, ContactResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("", response_model=List[ContactResponse])
async def list_contacts(store: Store):
    """List all contact submissions."""
    return [ContactResponse.model_validate(c) for c in store.get_contacts()]


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact(
    data: ContactCreate,
    store: Store,
    events: Events,
    client_ip: ClientIp,
):
    """Record a contact form submission."""
    contact = store.create_contact(data)

    events.log(
        event_type=EventType.CONTACT_SUBMITTED,
        entity_type="contact",
        entity_id=contact.id,
        payload={"inquiry_type": contact.inquiry_type},
        ip_address=client_ip,
    )
    logger.info("Contact received", extra={"contact_id": contact.id, "inquiry_type": contact.inquiry_type})
    return ContactResponse.model_validate(contact)
